"""HTTP client for a running KVS server."""

from urllib.parse import quote

import requests


class KVSClient:
    """
    Thin client over the KVS HTTP surface.

    Every call returns the raw ``requests.Response``; status codes carry
    the outcome (200, 404, 405, 500) and the body is the server's text.

    Usage:
        client = KVSClient("http://localhost:8080")
        client.put("a", "hello").text      # "a is set to hello\n"
        client.get("a").text               # "a is a hello\n"
    """

    def __init__(self, base_url: str, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def url_for(self, key: str) -> str:
        return f"{self.base_url}/{quote(key, safe='/')}"

    def get(self, key: str) -> requests.Response:
        return self.session.get(self.url_for(key), timeout=self.timeout)

    def put(self, key: str, value: str) -> requests.Response:
        """Store value under key as a form-encoded POST."""
        return self.session.post(
            self.url_for(key), data={"value": value}, timeout=self.timeout
        )

    def delete(self, key: str) -> requests.Response:
        return self.session.delete(self.url_for(key), timeout=self.timeout)

    def request(self, method: str, key: str) -> requests.Response:
        """Send an arbitrary method, e.g. to probe the 405 path."""
        return self.session.request(method, self.url_for(key), timeout=self.timeout)

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
