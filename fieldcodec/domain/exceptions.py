"""Domain exceptions for the field-value codec.

A converter declines a value it does not recognise by returning None; these
exceptions are reserved for structural violations and store failures that
must reach the caller.
"""

from typing import Any


class FieldValueException(Exception):
    """Base exception for all codec errors.

    All custom exceptions inherit from this class so callers can handle
    codec failures uniformly using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. key, type).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class TopLevelOnlyFieldException(FieldValueException):
    """Raised when a top-level-only type is nested inside an array or map field."""

    def __init__(self, type_name: str, key: str) -> None:
        """Initialize with the offending type and field key.

        Args:
            type_name: '@type' of the top-level-only value.
            key: Document field that holds the collection.
        """
        super().__init__(
            f"{type_name} cannot be placed in a list or map (field '{key}'); "
            "it must occupy a document field by itself",
            "TOP_LEVEL_ONLY_FIELD",
            {"type": type_name, "key": key},
        )


class UnsupportedFieldTransformException(FieldValueException):
    """Raised when a server transform (increment, server timestamp) sits inside an array."""

    def __init__(self, field_path: str) -> None:
        super().__init__(
            f"Field transforms are not supported inside arrays: {field_path}",
            "UNSUPPORTED_FIELD_TRANSFORM",
            {"field_path": field_path},
        )


class StoreNotConfiguredException(FieldValueException):
    """Raised when an operation requires Firestore but no client is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a Firestore client that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
