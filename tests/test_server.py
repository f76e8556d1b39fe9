"""
Tests for the threaded HTTP server and the entry point

These tests verify:
- KVServer binds, serves and stops
- main() exits fatally when storage or listener setup fails
- settings and command line flags

Run with: python -m pytest tests/test_server.py -v
"""

import socket
import threading
from contextlib import closing
from unittest import mock

import pytest

from kvs import server as server_module
from kvs.network.http_server import KVServer
from kvs.storage.store import Storage


class TestKVServer:
    """Test KVServer lifecycle."""

    def test_server_is_running(self, server: KVServer):
        assert server.is_running() is True

    def test_server_binds_free_port(self, server: KVServer):
        host, port = server.address
        assert host == "127.0.0.1"
        assert port > 0

    def test_server_uses_given_storage(self, server: KVServer, storage: Storage):
        assert server.storage is storage

    def test_address_requires_bind(self):
        srv = KVServer(host="127.0.0.1", port=0)
        with pytest.raises(RuntimeError):
            srv.address

    def test_default_storage_created(self):
        srv = KVServer(host="127.0.0.1", port=0)
        assert isinstance(srv.storage, Storage)

    def test_wait_until_running_times_out(self):
        srv = KVServer(host="127.0.0.1", port=0)
        assert srv.wait_until_running(timeout=0.01) is False

    def test_stop_without_start(self):
        srv = KVServer(host="127.0.0.1", port=0)
        srv.stop()
        srv.bind()
        srv.stop()
        assert srv.is_running() is False

    def test_stop_releases_port(self):
        srv = KVServer(host="127.0.0.1", port=0)
        srv.bind()
        _, port = srv.address

        thread = threading.Thread(target=srv.start, daemon=True)
        thread.start()
        assert srv.wait_until_running(timeout=5)
        srv.stop()
        thread.join(timeout=5)

        assert not thread.is_alive()
        assert srv.is_running() is False
        with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind(("127.0.0.1", port))

    def test_bind_failure_raises(self):
        with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
            s.bind(("127.0.0.1", 0))
            s.listen(1)
            port = s.getsockname()[1]

            srv = KVServer(host="127.0.0.1", port=port)
            with pytest.raises(OSError):
                srv.bind()


class TestMain:
    """Test the command line entry point."""

    def test_parse_args_defaults(self):
        args = server_module.parse_args([])

        assert args.host == server_module.settings.HOST
        assert args.port == server_module.settings.PORT
        assert args.shards == server_module.settings.SHARD_COUNT

    def test_parse_args_overrides(self):
        args = server_module.parse_args(
            ["--host", "0.0.0.0", "--port", "9090", "--shards", "4", "--debug"]
        )

        assert args.host == "0.0.0.0"
        assert args.port == 9090
        assert args.shards == 4
        assert args.debug is True

    def test_invalid_storage_exits(self):
        with mock.patch.object(server_module, "setup_logging"):
            with pytest.raises(SystemExit) as exc_info:
                server_module.main(["--shards", "0"])

        assert exc_info.value.code == 1

    def test_listener_failure_exits(self):
        with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
            s.bind(("127.0.0.1", 0))
            s.listen(1)
            port = s.getsockname()[1]

            with mock.patch.object(server_module, "setup_logging"):
                with pytest.raises(SystemExit) as exc_info:
                    server_module.main(["--host", "127.0.0.1", "--port", str(port)])

        assert exc_info.value.code == 1

    def test_keyboard_interrupt_stops_server(self):
        with mock.patch.object(server_module, "setup_logging"), \
                mock.patch.object(server_module.signal, "signal"), \
                mock.patch.object(KVServer, "bind"), \
                mock.patch.object(KVServer, "start", side_effect=KeyboardInterrupt), \
                mock.patch.object(KVServer, "stop") as stop:
            server_module.main(["--host", "127.0.0.1", "--port", "0"])

        stop.assert_called_once()
