"""Custom exception hierarchy for keyQL.

All public errors inherit from KeyQLError so callers can catch the base
class for any keyQL-specific failure.
"""
from __future__ import annotations

from typing import Any


class KeyQLError(Exception):
    """Base exception for all keyQL errors."""


class InvalidInputError(KeyQLError):
    """Raised when a persistence call is rejected before any SQL is built.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. EMPTY_TABLE).
        details: Extra context about the rejected input.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for API callers."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class EmptyDataError(InvalidInputError):
    """Raised when the column/value mapping is empty."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Data cannot be empty for {operation} operation.",
            code="EMPTY_DATA",
            details={"operation": operation},
        )


class EmptyTableError(InvalidInputError):
    """Raised when the table name is empty."""

    def __init__(self) -> None:
        super().__init__("Table name cannot be empty.", code="EMPTY_TABLE")


class EmptyPrimaryKeyError(InvalidInputError):
    """Raised when the primary key column name is empty."""

    def __init__(self) -> None:
        super().__init__(
            "Primary key name cannot be empty.", code="EMPTY_PRIMARY_KEY"
        )


class EmptyAfterKeyStripError(InvalidInputError):
    """Raised when only the auto-increment primary key was supplied to INSERT."""

    def __init__(self, primary_key: str) -> None:
        super().__init__(
            f"Data is empty after removing auto-increment primary key '{primary_key}'. "
            "Provide at least one other column.",
            code="EMPTY_AFTER_KEY_STRIP",
            details={"primary_key": primary_key},
        )


class InvalidPrimaryValueError(InvalidInputError):
    """Raised when the primary key value is ``None`` or an empty string."""

    def __init__(self, primary_key: str) -> None:
        super().__init__(
            "Primary key value cannot be None or empty.",
            code="INVALID_PRIMARY_VALUE",
            details={"primary_key": primary_key},
        )


class PrimaryKeyInDataError(InvalidInputError):
    """Raised when an UPDATE tries to change the primary key itself."""

    def __init__(self, primary_key: str) -> None:
        super().__init__(
            f'Cannot update primary key "{primary_key}". Remove it from data.',
            code="PRIMARY_KEY_IN_DATA",
            details={"primary_key": primary_key},
        )


class InvalidConfigError(InvalidInputError):
    """Raised when the dialect / version configuration is malformed."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(
            message,
            code="INVALID_CONFIG",
            details={"errors": errors or []},
        )


class SchemaError(KeyQLError):
    """Raised when table metadata cannot be turned into a TableKey.

    Args:
        message: Human-readable description.
        table: The table being inspected, when known.
    """

    def __init__(self, message: str, table: str | None = None) -> None:
        super().__init__(message)
        self.table = table


class CompilationError(KeyQLError):
    """Raised when SQL rendering fails.

    Args:
        message: Human-readable description.
        clause: The statement clause being rendered when the error occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause
