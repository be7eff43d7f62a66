"""Input validation for primary-key-addressed persistence calls.

``PersistValidator`` runs every precondition check before a statement
builder is touched.  Checks run in a fixed order and the first violation
is raised as a subclass of
:class:`~keyql.errors.InvalidInputError`, so callers get one distinct
error code per rejected input.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from keyql.errors import (
    EmptyAfterKeyStripError,
    EmptyDataError,
    EmptyPrimaryKeyError,
    EmptyTableError,
    InvalidPrimaryValueError,
    PrimaryKeyInDataError,
)


class PersistValidator:
    """Validates table, data and primary-key arguments for INSERT / UPDATE / DELETE.

    Stateless; a single instance may be shared freely.
    """

    def check_insert(
        self,
        table: str,
        data: Mapping[str, Any],
        primary_key: str,
        auto_increment: bool,
    ) -> dict[str, Any]:
        """Validate INSERT arguments and return the columns to insert.

        When ``auto_increment`` is set, ``primary_key`` is dropped from the
        returned mapping.  ``data`` itself is never modified.

        Raises:
            EmptyDataError: ``data`` is empty.
            EmptyTableError: ``table`` is empty.
            EmptyAfterKeyStripError: only the auto-increment key was given.
        """
        if not data:
            raise EmptyDataError("INSERT")
        self._check_table(table)

        columns = dict(data)
        if auto_increment:
            columns.pop(primary_key, None)
        if not columns:
            raise EmptyAfterKeyStripError(primary_key)
        return columns

    def check_update(
        self,
        table: str,
        data: Mapping[str, Any],
        primary_key: str,
        primary_value: Any,
    ) -> None:
        """Validate UPDATE arguments.

        Raises:
            EmptyDataError: ``data`` is empty.
            EmptyTableError: ``table`` is empty.
            EmptyPrimaryKeyError: ``primary_key`` is empty.
            InvalidPrimaryValueError: ``primary_value`` is ``None`` or ``""``.
            PrimaryKeyInDataError: ``data`` would overwrite the primary key.
        """
        if not data:
            raise EmptyDataError("UPDATE")
        self._check_table(table)
        self._check_primary_key(primary_key, primary_value)
        if primary_key in data:
            raise PrimaryKeyInDataError(primary_key)

    def check_delete(self, table: str, primary_key: str, primary_value: Any) -> None:
        """Validate DELETE arguments.

        Raises:
            EmptyTableError: ``table`` is empty.
            EmptyPrimaryKeyError: ``primary_key`` is empty.
            InvalidPrimaryValueError: ``primary_value`` is ``None`` or ``""``.
        """
        self._check_table(table)
        self._check_primary_key(primary_key, primary_value)

    # ------------------------------------------------------------------
    # Shared checks
    # ------------------------------------------------------------------

    @staticmethod
    def _check_table(table: str) -> None:
        if not table:
            raise EmptyTableError()

    @staticmethod
    def _check_primary_key(primary_key: str, primary_value: Any) -> None:
        if not primary_key:
            raise EmptyPrimaryKeyError()
        # 0 and False are legitimate key values.
        if primary_value is None or (isinstance(primary_value, str) and primary_value == ""):
            raise InvalidPrimaryValueError(primary_key)
