"""
Key-Value Storage Module

This module implements the core key-value storage functionality.

Provides:
- KVStorage: the three-operation contract (get, put, delete)
- Storage: a thread-safe, sharded in-memory implementation

Every operation first checks that the storage is initialized and the
key is a non-empty string, raising NotInitializedOrInvalidKeyError
otherwise. Nothing is mutated when that check fails.
"""

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from ..config.settings import settings
from .errors import NotInitializedOrInvalidKeyError


class KVStorage(ABC):
    """Contract shared by every storage backend."""

    @abstractmethod
    def get(self, key: str) -> Tuple[Optional[Any], bool]:
        """Return ``(value, True)`` if key is stored, ``(None, False)`` otherwise."""

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """Insert or overwrite the value for key."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present."""


class _Shard:
    """A dict guarded by its own lock."""

    __slots__ = ("lock", "entries")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.entries: Dict[str, Any] = {}


class Storage(KVStorage):
    """
    Thread-safe in-memory key-value storage.

    Keys are spread over a fixed number of shards, each protected by
    its own lock, so callers touching different shards do not contend.
    A key always lands in the same shard, which makes every single
    get/put/delete atomic with respect to other operations on that key.
    There is no cross-key atomicity and no snapshot isolation.

    Values are opaque: the storage never inspects them, and an empty
    value is stored like any other.

    Usage:
        storage = Storage()
        storage.put("answer", "42")
        value, found = storage.get("answer")   # ("42", True)
        storage.delete("answer")

    Attributes:
        initialized: Set at construction; when False every operation fails
    """

    def __init__(self, shard_count: int = None):
        """
        Initialize the storage.

        Args:
            shard_count: Number of shards (default from settings.SHARD_COUNT)

        Raises:
            ValueError: If shard_count is not positive
        """
        count = shard_count if shard_count is not None else settings.SHARD_COUNT
        if count <= 0:
            raise ValueError("shard_count must be positive")

        self._shards: List[_Shard] = [_Shard() for _ in range(count)]
        self.initialized = True

    @property
    def shard_count(self) -> int:
        return len(self._shards)

    def _shard_for(self, key: str) -> _Shard:
        """Validate the call and return the shard owning key."""
        if not self.initialized or not isinstance(key, str) or not key:
            raise NotInitializedOrInvalidKeyError(key)
        return self._shards[hash(key) % len(self._shards)]

    def get(self, key: str) -> Tuple[Optional[Any], bool]:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up

        Returns:
            ``(value, True)`` if the key is stored, ``(None, False)`` if not.
            A missing key is a normal result, never an error.

        Raises:
            NotInitializedOrInvalidKeyError: Storage unusable or key empty
        """
        shard = self._shard_for(key)
        with shard.lock:
            if key in shard.entries:
                return shard.entries[key], True
            return None, False

    def put(self, key: str, value: Any) -> None:
        """
        Insert or update a key-value pair. Last write wins.

        Args:
            key: The key to store
            value: The value to associate with the key

        Raises:
            NotInitializedOrInvalidKeyError: Storage unusable or key empty
        """
        shard = self._shard_for(key)
        with shard.lock:
            shard.entries[key] = value

    def delete(self, key: str) -> None:
        """
        Delete a key-value pair.

        Deleting a missing key succeeds silently.

        Args:
            key: The key to delete

        Raises:
            NotInitializedOrInvalidKeyError: Storage unusable or key empty
        """
        shard = self._shard_for(key)
        with shard.lock:
            shard.entries.pop(key, None)

    def size(self) -> int:
        """
        Get the current number of keys in the storage.

        Shards are counted one after another, so under concurrent writes
        the result is not a point-in-time snapshot.
        """
        total = 0
        for shard in self._shards:
            with shard.lock:
                total += len(shard.entries)
        return total
