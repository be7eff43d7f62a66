"""MySQL dialect compiler."""

from __future__ import annotations

from sqlalchemy.dialects import mysql

from keyql.compile.base import SQLCompiler

_PREPARER = mysql.dialect().identifier_preparer


class MySQLCompiler(SQLCompiler):
    """Compiles statements to MySQL-flavoured prepared SQL.

    Parameter style: ``%s`` (DB-API ``format``) – compatible with ``PyMySQL``
    and ``mysql-connector-python`` positional execution.

    Identifiers are quoted with backticks (`` ` ``), and only when MySQL
    requires it (reserved words, mixed case, special characters).
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    def param_placeholder(self) -> str:
        return "%s"

    def quote_identifier(self, name: str) -> str:
        return _PREPARER.quote(name)
