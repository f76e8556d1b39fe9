"""
HTTP Reply Definitions

This module defines the plain-text replies the adapter sends back,
one named constructor per outcome.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from flask import Response

ALLOWED_METHODS = ("GET", "POST", "DELETE")

NOT_FOUND_MESSAGE = "404 There is no record in the storage for key '{key}'.\n"
INTERNAL_ERROR_MESSAGE = "500 Internal storage error.\n"
METHOD_NOT_ALLOWED_MESSAGE = "Sorry, only GET, POST and DELETE methods are allowed"

CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass
class Reply:
    """
    Represents an adapter reply.

    Attributes:
        status: HTTP status code
        body: Plain-text response body
        headers: Extra response headers
    """
    status: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def found(cls, key: str, value: Any) -> "Reply":
        """Create a reply for a GET that hit a stored value."""
        return cls(200, f"{key} is a {value}\n")

    @classmethod
    def stored(cls, key: str, value: Any) -> "Reply":
        """Create a reply for a successful POST."""
        return cls(200, f"{key} is set to {value}\n")

    @classmethod
    def deleted(cls, key: str) -> "Reply":
        """Create a reply for a successful DELETE."""
        return cls(200, f"{key} is deleted\n")

    @classmethod
    def not_found(cls, key: str) -> "Reply":
        """Create a 'no record' reply for a GET on a missing key."""
        return cls(404, NOT_FOUND_MESSAGE.format(key=key), {"X-Content-Type-Options": "nosniff"})

    @classmethod
    def internal_error(cls) -> "Reply":
        """Create a reply for any storage failure."""
        return cls(500, INTERNAL_ERROR_MESSAGE, {"X-Content-Type-Options": "nosniff"})

    @classmethod
    def method_not_allowed(cls) -> "Reply":
        """Create a reply for any method other than GET, POST and DELETE."""
        return cls(
            405,
            METHOD_NOT_ALLOWED_MESSAGE,
            {"Allow": ", ".join(ALLOWED_METHODS), "X-Content-Type-Options": "nosniff"},
        )

    def to_response(self) -> Response:
        """Build the Flask response object."""
        return Response(
            self.body,
            status=self.status,
            headers=self.headers,
            content_type=CONTENT_TYPE,
        )
