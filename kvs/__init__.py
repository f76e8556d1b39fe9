"""
KVS: In-Memory Key-Value Store over HTTP

A small concurrency-safe key-value store exposed through a threaded
HTTP server. GET, POST and DELETE on ``/<key>`` read, write and remove
entries.
"""

__version__ = "1.0.0"
