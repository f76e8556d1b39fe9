"""HTTP adapter for KVS."""

from .handler import create_app
from .replies import Reply

__all__ = ["Reply", "create_app"]
