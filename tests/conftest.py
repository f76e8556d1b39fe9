"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import threading
from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from kvs.api.handler import create_app
from kvs.client import KVSClient
from kvs.network.http_server import KVServer
from kvs.storage.store import Storage


# ============================================================================
# Storage Fixtures
# ============================================================================

@pytest.fixture
def storage() -> Storage:
    """Create a fresh Storage instance with default shard count."""
    return Storage()


@pytest.fixture
def single_shard_storage() -> Storage:
    """Create a Storage with one shard so every key contends on one lock."""
    return Storage(shard_count=1)


@pytest.fixture
def broken_storage() -> Storage:
    """Create a Storage that behaves as if it was never initialized."""
    s = Storage()
    s.initialized = False
    return s


# ============================================================================
# Adapter Fixtures
# ============================================================================

@pytest.fixture
def app(storage: Storage) -> Flask:
    """Create the Flask app over the fresh storage."""
    application = create_app(storage)
    application.config.update(TESTING=True)
    return application


@pytest.fixture
def http(app: Flask) -> FlaskClient:
    """Flask test client for in-process requests."""
    return app.test_client()


@pytest.fixture
def broken_http(broken_storage: Storage) -> FlaskClient:
    """Flask test client whose storage rejects every call."""
    application = create_app(broken_storage)
    application.config.update(TESTING=True)
    return application.test_client()


# ============================================================================
# Server Fixtures
# ============================================================================

@pytest.fixture
def server(storage: Storage) -> Generator[KVServer, None, None]:
    """
    Create and start a real server instance for testing.

    This fixture:
    1. Binds a KVServer to a free port on 127.0.0.1
    2. Serves it from a background thread
    3. Yields the server for testing
    4. Shuts it down after the test
    """
    srv = KVServer(host='127.0.0.1', port=0, storage=storage)
    srv.bind()

    thread = threading.Thread(target=srv.start, daemon=True)
    thread.start()
    assert srv.wait_until_running(timeout=5)

    yield srv

    srv.stop()
    thread.join(timeout=5)


@pytest.fixture
def client(server: KVServer) -> Generator[KVSClient, None, None]:
    """HTTP client connected to the live server."""
    host, port = server.address
    with KVSClient(f"http://{host}:{port}") as c:
        yield c


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
