#!/usr/bin/env python3
"""
KVS Server Entry Point

This is the main entry point for starting the KVS server.

Usage:
    python -m kvs.server                    # Default settings (localhost:8080)
    python -m kvs.server --port 9090        # Custom port
    python -m kvs.server --host 0.0.0.0     # Custom host
    python -m kvs.server --shards 64        # Custom shard count
    python -m kvs.server --debug            # Enable debug logging

Environment Variables:
    KVS_HOST        - Server bind address
    KVS_PORT        - Server port
    KVS_SHARDS      - Number of storage shards
    KVS_DEBUG       - Enable debug mode (true/false)
    KVS_LOG_LEVEL   - Log level when not in debug mode
"""

import argparse
import logging
import signal
import sys
from typing import List, Optional

from .config.settings import settings
from .network.http_server import KVServer
from .storage.store import Storage


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="KVS: In-Memory Key-Value Store over HTTP",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--host",
        type=str,
        default=settings.HOST,
        help="Host address to bind to",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=settings.PORT,
        help="Port number to listen on",
    )

    parser.add_argument(
        "--shards",
        type=int,
        default=settings.SHARD_COUNT,
        help="Number of storage shards",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def _interrupt(signum, frame) -> None:
    raise KeyboardInterrupt


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the server."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    try:
        storage = Storage(shard_count=args.shards)
    except ValueError as e:
        logger.critical(f"Cannot initialize storage: {e}")
        sys.exit(1)

    server = KVServer(host=args.host, port=args.port, storage=storage)

    try:
        server.bind()
    except OSError as e:
        logger.critical(f"Cannot listen on {args.host}:{args.port}: {e}")
        sys.exit(1)

    if sys.platform != 'win32':
        signal.signal(signal.SIGTERM, _interrupt)

    logger.info("Starting KVS server")
    logger.info(f"  Host: {args.host}")
    logger.info(f"  Port: {args.port}")
    logger.info(f"  Shards: {storage.shard_count}")
    logger.info(f"  Debug: {args.debug}")

    try:
        server.start()
    except KeyboardInterrupt:
        logger.info("Shutdown requested")
    finally:
        server.stop()
        logger.info("Server shutdown complete")


if __name__ == "__main__":
    main()
