"""PostgreSQL dialect compiler."""

from __future__ import annotations

from sqlalchemy.dialects import postgresql

from keyql.compile.base import SQLCompiler

_PREPARER = postgresql.dialect().identifier_preparer


class PostgresCompiler(SQLCompiler):
    """Compiles statements to PostgreSQL-flavoured prepared SQL.

    Parameter style: ``%s`` (DB-API ``format``) – compatible with ``psycopg2``
    and ``psycopg`` positional execution.

    Mixed-case names are double-quoted so PostgreSQL does not fold them to
    lower case.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def param_placeholder(self) -> str:
        return "%s"

    def quote_identifier(self, name: str) -> str:
        return _PREPARER.quote(name)
