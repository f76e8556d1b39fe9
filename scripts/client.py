#!/usr/bin/env python3
"""
Interactive Test Client for KVS

A simple command-line client for manually testing the KVS server.

Usage:
    python scripts/client.py                  # Connect to localhost:8080
    python scripts/client.py --host 1.2.3.4   # Connect to specific host
    python scripts/client.py --port 9090      # Connect to specific port

Commands:
    GET <key>                 - Retrieve a value
    SET <key> <value>         - Store a key-value pair
    DELETE <key>              - Delete a key
    help                      - Show this help
    exit                      - Exit client
"""

import argparse
import sys

import requests

from kvs.client import KVSClient

# Enable command history with arrow keys (works on Unix systems)
try:
    import readline  # noqa: F401
except ImportError:
    pass  # readline not available on Windows by default


def print_help():
    """Print help message."""
    print("""
KVS Commands:
-------------
  GET <key>                 Retrieve the value for a key
  SET <key> <value>         Store a key-value pair (value may contain spaces)
  DELETE <key>              Delete a key-value pair

Client Commands:
----------------
  help                      Show this help message
  exit                      Exit the client

Examples:
---------
  SET mykey myvalue         Store "myvalue" under "mykey"
  GET mykey                 Get value for "mykey"
  DELETE mykey              Delete "mykey"
""")


def run_command(client: KVSClient, line: str) -> str:
    """Execute one REPL line and return the text to print."""
    parts = line.split(maxsplit=2)
    verb = parts[0].upper()

    if verb == "GET" and len(parts) == 2:
        response = client.get(parts[1])
    elif verb == "SET" and len(parts) >= 2:
        response = client.put(parts[1], parts[2] if len(parts) == 3 else "")
    elif verb == "DELETE" and len(parts) == 2:
        response = client.delete(parts[1])
    else:
        return "ERROR: unknown command (type 'help')"

    return f"[{response.status_code}] {response.text.rstrip()}"


def main():
    parser = argparse.ArgumentParser(
        description="Interactive test client for KVS"
    )
    parser.add_argument(
        "--host",
        type=str,
        default="localhost",
        help="Server host (default: localhost)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8080,
        help="Server port (default: 8080)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=5.0,
        help="Request timeout in seconds (default: 5.0)"
    )

    args = parser.parse_args()

    print("KVS Client")
    print("==========")
    print(f"Talking to http://{args.host}:{args.port}")
    print("Type 'help' for commands.\n")

    with KVSClient(f"http://{args.host}:{args.port}", args.timeout) as client:
        try:
            while True:
                try:
                    command = input(">>> ").strip()
                except EOFError:
                    print("\nGoodbye!")
                    break

                if not command:
                    continue

                lower_cmd = command.lower()

                if lower_cmd == "help":
                    print_help()
                    continue

                if lower_cmd in ("exit", "quit"):
                    print("Goodbye!")
                    break

                try:
                    print(run_command(client, command))
                except requests.RequestException as e:
                    print(f"ERROR: {e}")
                    print(f"  Is the server running? Try: python -m kvs.server --port {args.port}")

        except KeyboardInterrupt:
            print("\n\nInterrupted. Goodbye!")
            sys.exit(0)


if __name__ == "__main__":
    main()
