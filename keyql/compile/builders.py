"""Statement-level SQL builders.

Each class assembles exactly one statement kind incrementally and renders
it through the dialect compiler registered in
:class:`~keyql.compile.registry.CompilerFactory`.  Mutators return ``self``
so calls chain::

    stmt = (
        UpdateBuilder()
        .table("users")
        .set_many({"name": "John", "age": 31})
        .where("id", 42)
        .build(PersistConfig(dialect="sqlite"))
    )
    # UPDATE users SET name = ?, age = ? WHERE id = ?   ("John", 31, 42)

Classes
-------
InsertBuilder   : ``INSERT INTO <table> (<cols>) VALUES (<placeholders>)``
UpdateBuilder   : ``UPDATE <table> SET <col> = <placeholder>, … WHERE …``
DeleteBuilder   : ``DELETE FROM <table> WHERE …``

UPDATE and DELETE refuse to render without a WHERE condition.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from keyql.compile.base import PreparedStatement, SQLCompiler
from keyql.compile.registry import CompilerFactory
from keyql.errors import CompilationError
from keyql.schema.config import PersistConfig


@dataclass(frozen=True)
class WhereCondition:
    """A single ``column = value`` equality condition."""

    column: str
    value: Any


class _StatementBuilder(ABC):
    """Shared rendering steps for the three statement builders."""

    _kind = ""

    def __init__(self) -> None:
        self._table: str | None = None
        self._where: list[WhereCondition] = []

    def build(self, config: PersistConfig | None = None) -> PreparedStatement:
        """Render the statement for ``config.dialect``.

        Args:
            config: Target dialect and version; defaults to ``PersistConfig()``.

        Returns:
            :class:`~keyql.compile.base.PreparedStatement` with positional
            placeholders and bindings in placeholder order.

        Raises:
            CompilationError: If the dialect is unknown or the statement is
                incomplete.
        """
        if config is None:
            config = PersistConfig()
        compiler = CompilerFactory.create(config.dialect, version=config.version)
        if not self._table:
            raise CompilationError(f"{self._kind} statement has no table.", clause="TABLE")
        bindings: list[Any] = []
        sql = self._render(compiler, bindings)
        return PreparedStatement(
            sql=sql,
            bindings=tuple(bindings),
            dialect=config.dialect,
            version=compiler.version,
        )

    @abstractmethod
    def _render(self, compiler: SQLCompiler, bindings: list[Any]) -> str:
        """Return the statement text, appending bound values to ``bindings``."""

    def _render_where(self, compiler: SQLCompiler, bindings: list[Any]) -> str:
        if not self._where:
            raise CompilationError(
                f"{self._kind} statement has no WHERE condition.", clause="WHERE"
            )
        parts: list[str] = []
        for cond in self._where:
            column = compiler.quote_identifier(cond.column)
            if cond.value is None:
                parts.append(f"{column} IS NULL")
            else:
                parts.append(f"{column} = {compiler.param_placeholder()}")
                bindings.append(cond.value)
        return "WHERE " + " AND ".join(parts)

    def _add_where(self, column: str, value: Any) -> None:
        self._where.append(WhereCondition(column=column, value=value))


class InsertBuilder(_StatementBuilder):
    """Builds ``INSERT INTO <table> (<cols>) VALUES (<placeholders>)``."""

    _kind = "INSERT"

    def __init__(self) -> None:
        super().__init__()
        self._values: dict[str, Any] = {}

    def into(self, table: str) -> InsertBuilder:
        self._table = table
        return self

    def values(self, data: Mapping[str, Any]) -> InsertBuilder:
        """Add columns to insert; later calls override earlier keys."""
        self._values.update(data)
        return self

    def _render(self, compiler: SQLCompiler, bindings: list[Any]) -> str:
        if not self._values:
            raise CompilationError("INSERT statement has no columns.", clause="VALUES")
        columns = ", ".join(compiler.quote_identifier(c) for c in self._values)
        placeholders = ", ".join(compiler.param_placeholder() for _ in self._values)
        bindings.extend(self._values.values())
        table = compiler.quote_table(self._table)
        return f"INSERT INTO {table} ({columns}) VALUES ({placeholders})"


class UpdateBuilder(_StatementBuilder):
    """Builds ``UPDATE <table> SET … WHERE …``.

    SET values are bound first, in assignment order, followed by the WHERE
    values in condition order.
    """

    _kind = "UPDATE"

    def __init__(self) -> None:
        super().__init__()
        self._assignments: dict[str, Any] = {}

    def table(self, table: str) -> UpdateBuilder:
        self._table = table
        return self

    def set(self, column: str, value: Any) -> UpdateBuilder:
        self._assignments[column] = value
        return self

    def set_many(self, data: Mapping[str, Any]) -> UpdateBuilder:
        self._assignments.update(data)
        return self

    def where(self, column: str, value: Any) -> UpdateBuilder:
        """Add a ``column = value`` condition, AND-joined with earlier ones."""
        self._add_where(column, value)
        return self

    def _render(self, compiler: SQLCompiler, bindings: list[Any]) -> str:
        if not self._assignments:
            raise CompilationError("UPDATE statement has no columns to set.", clause="SET")
        placeholder = compiler.param_placeholder()
        assignments = ", ".join(
            f"{compiler.quote_identifier(c)} = {placeholder}" for c in self._assignments
        )
        bindings.extend(self._assignments.values())
        where_sql = self._render_where(compiler, bindings)
        table = compiler.quote_table(self._table)
        return f"UPDATE {table} SET {assignments} {where_sql}"


class DeleteBuilder(_StatementBuilder):
    """Builds ``DELETE FROM <table> WHERE …``."""

    _kind = "DELETE"

    def from_(self, table: str) -> DeleteBuilder:
        self._table = table
        return self

    def where(self, column: str, value: Any) -> DeleteBuilder:
        """Add a ``column = value`` condition, AND-joined with earlier ones."""
        self._add_where(column, value)
        return self

    def _render(self, compiler: SQLCompiler, bindings: list[Any]) -> str:
        where_sql = self._render_where(compiler, bindings)
        table = compiler.quote_table(self._table)
        return f"DELETE FROM {table} {where_sql}"
