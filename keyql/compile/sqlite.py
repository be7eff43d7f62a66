"""SQLite dialect compiler."""
from __future__ import annotations

from sqlalchemy.dialects import sqlite

from keyql.compile.base import SQLCompiler

_PREPARER = sqlite.dialect().identifier_preparer


class SQLiteCompiler(SQLCompiler):
    """Compiles statements to SQLite-flavoured prepared SQL.

    Parameter style: ``?`` (DB-API ``qmark``) – compatible with Python's
    built-in ``sqlite3`` positional execution (``cursor.execute(sql, tuple)``).
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    def param_placeholder(self) -> str:
        return "?"

    def quote_identifier(self, name: str) -> str:
        return _PREPARER.quote(name)
