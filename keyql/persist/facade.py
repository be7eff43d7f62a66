"""Shortcut CRUD statements for single rows addressed by primary key.

``PersistenceFacade`` validates its arguments with
:class:`~keyql.validate.validator.PersistValidator`, then delegates to a
fresh :class:`~keyql.compile.builders.InsertBuilder`,
:class:`~keyql.compile.builders.UpdateBuilder` or
:class:`~keyql.compile.builders.DeleteBuilder` and returns its
:class:`~keyql.compile.base.PreparedStatement`::

    persist = PersistenceFacade()
    stmt = persist.insert("users", {"id": 7, "name": "John"}, "id", dialect="sqlite")
    cursor.execute(*stmt.execute_args())
    # INSERT INTO users (name) VALUES (?)   ("John",)

No statement is executed here and no state is kept between calls.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from keyql.compile.base import PreparedStatement
from keyql.compile.builders import DeleteBuilder, InsertBuilder, UpdateBuilder
from keyql.errors import InvalidConfigError, InvalidInputError
from keyql.schema.config import DEFAULT_DIALECT, PersistConfig
from keyql.utils.logging import get_logger
from keyql.validate.validator import PersistValidator

logger = get_logger(__name__)

_VALIDATOR = PersistValidator()


class PersistenceFacade:
    """Builds INSERT / UPDATE / DELETE prepared statements for one row.

    Every method checks its preconditions first and raises an
    :class:`~keyql.errors.InvalidInputError` subclass before any builder is
    created.  ``dialect`` and ``version`` are forwarded untouched to the
    builder via :class:`~keyql.schema.config.PersistConfig`.
    """

    def insert(
        self,
        table: str,
        data: Mapping[str, Any],
        primary_key: str,
        auto_increment: bool = True,
        dialect: str = DEFAULT_DIALECT,
        version: str | None = None,
    ) -> PreparedStatement:
        """Build an INSERT for ``data``, dropping an auto-increment primary key.

        Args:
            table: Target table name.
            data: Column/value mapping; its order fixes column and binding order.
            primary_key: Name of the primary key column.
            auto_increment: When ``True`` the database assigns the key, so
                ``primary_key`` is removed from the inserted columns.
            dialect: Registered dialect name.
            version: Optional database version.

        Returns:
            The prepared INSERT statement.

        Raises:
            EmptyDataError: ``data`` is empty.
            EmptyTableError: ``table`` is empty.
            EmptyAfterKeyStripError: ``data`` held only the auto-increment key.
            InvalidConfigError: ``dialect`` / ``version`` are malformed.
            CompilationError: ``dialect`` is not registered.
        """
        try:
            columns = _VALIDATOR.check_insert(table, data, primary_key, auto_increment)
        except InvalidInputError as exc:
            _log_rejected("insert", table, exc)
            raise
        config = _make_config(dialect, version)

        stmt = InsertBuilder().into(table).values(columns).build(config)
        _log_built("insert", table, list(columns), stmt)
        return stmt

    def update(
        self,
        table: str,
        data: Mapping[str, Any],
        primary_key: str,
        primary_value: Any,
        dialect: str = DEFAULT_DIALECT,
        version: str | None = None,
    ) -> PreparedStatement:
        """Build an UPDATE of ``data`` for the row where ``primary_key = primary_value``.

        Bindings are the ``data`` values in insertion order followed by
        ``primary_value``.

        Raises:
            EmptyDataError: ``data`` is empty.
            EmptyTableError: ``table`` is empty.
            EmptyPrimaryKeyError: ``primary_key`` is empty.
            InvalidPrimaryValueError: ``primary_value`` is ``None`` or ``""``.
            PrimaryKeyInDataError: ``data`` contains ``primary_key``.
            InvalidConfigError: ``dialect`` / ``version`` are malformed.
            CompilationError: ``dialect`` is not registered.
        """
        try:
            _VALIDATOR.check_update(table, data, primary_key, primary_value)
        except InvalidInputError as exc:
            _log_rejected("update", table, exc)
            raise
        config = _make_config(dialect, version)

        stmt = (
            UpdateBuilder()
            .table(table)
            .set_many(data)
            .where(primary_key, primary_value)
            .build(config)
        )
        _log_built("update", table, list(data), stmt)
        return stmt

    def delete(
        self,
        table: str,
        primary_key: str,
        primary_value: Any,
        dialect: str = DEFAULT_DIALECT,
        version: str | None = None,
    ) -> PreparedStatement:
        """Build a DELETE for the row where ``primary_key = primary_value``.

        Raises:
            EmptyTableError: ``table`` is empty.
            EmptyPrimaryKeyError: ``primary_key`` is empty.
            InvalidPrimaryValueError: ``primary_value`` is ``None`` or ``""``.
            InvalidConfigError: ``dialect`` / ``version`` are malformed.
            CompilationError: ``dialect`` is not registered.
        """
        try:
            _VALIDATOR.check_delete(table, primary_key, primary_value)
        except InvalidInputError as exc:
            _log_rejected("delete", table, exc)
            raise
        config = _make_config(dialect, version)

        stmt = DeleteBuilder().from_(table).where(primary_key, primary_value).build(config)
        _log_built("delete", table, [], stmt)
        return stmt


def _make_config(dialect: str, version: str | None) -> PersistConfig:
    try:
        return PersistConfig(dialect=dialect, version=version)
    except PydanticValidationError as exc:
        raise InvalidConfigError(
            f"Invalid dialect configuration: {exc.error_count()} error(s).",
            errors=[
                {"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()
            ],
        ) from exc


def _log_built(
    operation: str, table: str, columns: list[str], stmt: PreparedStatement
) -> None:
    # Bound values may hold personal data; only their count is logged.
    logger.debug(
        "statement_built",
        operation=operation,
        table=table,
        dialect=stmt.dialect,
        version=stmt.version,
        columns=columns,
        binding_count=len(stmt.bindings),
    )


def _log_rejected(operation: str, table: str, exc: InvalidInputError) -> None:
    logger.debug(
        "persist_input_rejected",
        operation=operation,
        table=table,
        code=exc.code,
    )
