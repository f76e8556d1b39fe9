"""
HTTP Adapter Module

Maps every inbound request to exactly one storage call:

    GET    /<key>   -> storage.get(key)
    POST   /<key>   -> storage.put(key, form value "value")
    DELETE /<key>   -> storage.delete(key)
    other           -> 405

The key is the request path with its leading "/" stripped. The adapter
holds no state of its own between requests; the storage instance is
passed in by the caller of create_app().
"""

import logging

from flask import Flask, request
from werkzeug.exceptions import MethodNotAllowed

from ..storage.errors import StorageError
from ..storage.store import KVStorage
from .replies import ALLOWED_METHODS, Reply

logger = logging.getLogger(__name__)


def _form_value(name: str) -> str:
    """Return a form field, body first, then the query string."""
    if name in request.form:
        return request.form[name]
    return request.args.get(name, "")


def create_app(storage: KVStorage) -> Flask:
    """Create and configure the Flask app.

    Args:
        storage: KVStorage instance shared by all requests

    Returns:
        Configured Flask app

    Raises:
        ValueError: If storage is None
    """
    if storage is None:
        raise ValueError("storage is required")

    app = Flask(__name__)

    def process(key: str):
        """Dispatch one request to the storage."""
        method = request.method
        logger.debug(f"{method} {key!r}")

        try:
            if method == "GET":
                value, found = storage.get(key)
                if not found:
                    reply = Reply.not_found(key)
                else:
                    reply = Reply.found(key, value)

            elif method == "POST":
                value = _form_value("value")
                storage.put(key, value)
                reply = Reply.stored(key, value)

            elif method == "DELETE":
                storage.delete(key)
                reply = Reply.deleted(key)

            else:
                reply = Reply.method_not_allowed()

        except StorageError as exc:
            logger.warning(f"Storage error on {method} {key!r}: {exc.message}")
            reply = Reply.internal_error()

        return reply.to_response()

    # HEAD is attached to GET rules by Werkzeug; process() answers it with 405
    app.add_url_rule(
        "/",
        "process_root",
        process,
        defaults={"key": ""},
        methods=list(ALLOWED_METHODS),
        provide_automatic_options=False,
    )
    app.add_url_rule(
        "/<path:key>",
        "process",
        process,
        methods=list(ALLOWED_METHODS),
        provide_automatic_options=False,
    )

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(_exc):
        return Reply.method_not_allowed().to_response()

    return app
