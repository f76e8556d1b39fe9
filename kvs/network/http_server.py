"""
Threaded HTTP Server Module

This module runs the KVS WSGI app on a threaded Werkzeug server.

Each request is handled on its own thread and runs to completion
synchronously against the shared storage. There is no queue, no
backpressure and no request timeout beyond what the listener imposes.
"""

import logging
import threading
from typing import Optional, Tuple

from flask import Flask
from werkzeug.serving import BaseWSGIServer, make_server

from ..api.handler import create_app
from ..config.settings import settings
from ..storage.store import KVStorage, Storage

logger = logging.getLogger(__name__)


class KVServer:
    """
    Threaded HTTP server for the KVS service.

    Usage:
        server = KVServer(host='localhost', port=8080)
        server.start()  # Blocks until stop() is called

    Attributes:
        host: Server bind address (e.g., 'localhost')
        port: Requested port number; 0 picks a free port
        storage: The KVStorage instance shared by all requests
        app: The Flask app serving requests
    """

    def __init__(
            self,
            host: str = None,
            port: int = None,
            storage: KVStorage = None,
    ):
        """
        Initialize the server.

        Args:
            host: Bind address (default from settings)
            port: Port number (default from settings)
            storage: KVStorage instance (creates new one if not provided)
        """
        self.host = host if host is not None else settings.HOST
        self.port = port if port is not None else settings.PORT
        self.storage = storage if storage is not None else Storage()
        self.app: Flask = create_app(self.storage)

        self._server: Optional[BaseWSGIServer] = None
        self._running = threading.Event()

    def bind(self) -> None:
        """
        Bind the listening socket without serving yet.

        Raises:
            OSError: If the address cannot be bound
        """
        if self._server is not None:
            return

        try:
            self._server = make_server(self.host, self.port, self.app, threaded=True)
        except SystemExit as exc:
            # Werkzeug reports bind failures by exiting
            raise OSError(f"cannot bind {self.host}:{self.port}") from exc

    @property
    def address(self) -> Tuple[str, int]:
        """
        The bound (host, port).

        Raises:
            RuntimeError: If the server is not bound
        """
        if self._server is None:
            raise RuntimeError("server is not bound")
        return self._server.server_address[0], self._server.server_port

    def start(self) -> None:
        """
        Start the server and serve until stop() is called.

        Raises:
            OSError: If the address cannot be bound
        """
        if self._running.is_set():
            return

        self.bind()
        server = self._server
        host, port = self.address
        self._running.set()

        logger.info(f"Serving on http://{host}:{port}")

        try:
            server.serve_forever()
        finally:
            self._running.clear()

    def wait_until_running(self, timeout: float = None) -> bool:
        """Block until start() has begun serving; False on timeout."""
        return self._running.wait(timeout)

    def stop(self) -> None:
        """
        Stop the server gracefully.

        Safe to call from another thread once start() is serving.
        """
        if self._server is None:
            return

        server, self._server = self._server, None
        if self._running.is_set():
            server.shutdown()
        server.server_close()
        self._running.clear()

    def is_running(self) -> bool:
        """Check if the server is currently running."""
        return self._running.is_set()
