"""Compiler abstractions: PreparedStatement and the SQLCompiler ABC.

The Template Method pattern (GoF) is used:
- ``SQLCompiler`` defines the hooks every statement builder relies on.
- ``MySQLCompiler``, ``PostgresCompiler`` and ``SQLiteCompiler`` override
  the dialect-specific steps (placeholder style, identifier quoting).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PreparedStatement:
    """The output of a successful statement build.

    Attributes:
        sql: The SQL string with positional placeholders.
        bindings: Values for the placeholders, in placeholder order.
        dialect: The dialect the statement was rendered for.
        version: The database version passed through to the compiler.
    """

    sql: str
    bindings: tuple[Any, ...]
    dialect: str
    version: str | None = None

    def execute_args(self) -> tuple[str, tuple[Any, ...]]:
        """Return ``(sql, bindings)`` for ``cursor.execute(*stmt.execute_args())``."""
        return self.sql, self.bindings


class SQLCompiler(ABC):
    """Abstract base for dialect-specific SQL compilers.

    Args:
        version: Optional database server version (e.g. ``'8.0'``).  Opaque
            to keyQL; carried onto every statement the compiler renders.
    """

    def __init__(self, version: str | None = None) -> None:
        self.version = version

    @abstractmethod
    def param_placeholder(self) -> str:
        """Return the positional placeholder for one bound value.

        Returns:
            Dialect-specific placeholder string (``'?'`` or ``'%s'``).
        """

    @abstractmethod
    def quote_identifier(self, name: str) -> str:
        """Return an identifier, quoted only if the dialect requires it.

        Args:
            name: Unquoted identifier (table or column name).

        Returns:
            Identifier safe to embed in SQL.
        """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (``'mysql'``, ``'postgres'``, ...)."""

    def quote_table(self, name: str) -> str:
        """Quote a possibly schema-qualified table name part by part."""
        return ".".join(self.quote_identifier(part) for part in name.split("."))
