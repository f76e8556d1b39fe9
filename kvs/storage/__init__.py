"""Storage module for KVS."""

from .errors import NotInitializedOrInvalidKeyError, StorageError
from .store import KVStorage, Storage

__all__ = [
    "KVStorage",
    "NotInitializedOrInvalidKeyError",
    "Storage",
    "StorageError",
]
