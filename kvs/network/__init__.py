"""Network module for KVS."""

from .http_server import KVServer

__all__ = ["KVServer"]
