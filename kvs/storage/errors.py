"""Exceptions raised by the storage layer.

Absence of a key is not an error: ``get`` reports it through its
``found`` flag. Only an unusable store or an invalid key raises.
"""

from typing import Any, Optional


class StorageError(Exception):
    """Base exception for all storage errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        context: Additional context information about the error
    """

    def __init__(
        self, message: str, error_code: str, context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}


class NotInitializedOrInvalidKeyError(StorageError):
    """Raised when the storage is not initialized or the key is empty.

    Both causes share one error, so callers cannot tell them apart
    from the exception alone.
    """

    MESSAGE = "Storage is not initialized or key is empty"

    def __init__(self, key: Any = None) -> None:
        super().__init__(
            message=self.MESSAGE,
            error_code="not_initialized_or_invalid_key",
            context={"key": key},
        )
