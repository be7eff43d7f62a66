"""keyQL – primary-key CRUD statements as dialect-aware prepared SQL.

Build the statement. Let the driver run it.

Public API
----------
``PersistenceFacade``
    Validate single-row INSERT / UPDATE / DELETE arguments and build the
    matching ``PreparedStatement``.

``InsertBuilder`` / ``UpdateBuilder`` / ``DeleteBuilder``
    The fluent statement builders the facade delegates to.

Re-exported types
-----------------
``PreparedStatement``, ``PersistConfig``, ``TableKey``, and all error
classes.

Extensibility
-------------
New dialect compilers can be registered via::

    from keyql.compile.registry import CompilerFactory

    @CompilerFactory.register("mariadb")
    class MariaDBCompiler(MySQLCompiler):
        ...

After registration every builder, and so the facade, accepts
``dialect="mariadb"``.
"""

from __future__ import annotations

from keyql.compile.base import PreparedStatement, SQLCompiler
from keyql.compile.builders import DeleteBuilder, InsertBuilder, UpdateBuilder
from keyql.compile.mysql import MySQLCompiler
from keyql.compile.postgres import PostgresCompiler
from keyql.compile.registry import CompilerFactory
from keyql.compile.sqlite import SQLiteCompiler
from keyql.errors import (
    CompilationError,
    EmptyAfterKeyStripError,
    EmptyDataError,
    EmptyPrimaryKeyError,
    EmptyTableError,
    InvalidConfigError,
    InvalidInputError,
    InvalidPrimaryValueError,
    KeyQLError,
    PrimaryKeyInDataError,
    SchemaError,
)
from keyql.persist.facade import PersistenceFacade
from keyql.schema.config import DEFAULT_DIALECT, PersistConfig
from keyql.schema.converters import table_key_from_engine, table_key_from_sqlalchemy
from keyql.schema.table_key import TableKey
from keyql.utils.logging import configure_logging
from keyql.validate.validator import PersistValidator

# ---------------------------------------------------------------------------
# Register built-in compilers with CompilerFactory
# ---------------------------------------------------------------------------

CompilerFactory.register_class("mysql", MySQLCompiler)
CompilerFactory.register_class("postgres", PostgresCompiler)
CompilerFactory.register_class("sqlite", SQLiteCompiler)

__all__ = [
    # Facade
    "PersistenceFacade",
    "PersistValidator",
    # Builders
    "InsertBuilder",
    "UpdateBuilder",
    "DeleteBuilder",
    "PreparedStatement",
    # Configuration
    "DEFAULT_DIALECT",
    "PersistConfig",
    "configure_logging",
    # Table metadata
    "TableKey",
    "table_key_from_sqlalchemy",
    "table_key_from_engine",
    # Compilation
    "SQLCompiler",
    "CompilerFactory",
    "MySQLCompiler",
    "PostgresCompiler",
    "SQLiteCompiler",
    # Errors
    "KeyQLError",
    "InvalidInputError",
    "EmptyDataError",
    "EmptyTableError",
    "EmptyPrimaryKeyError",
    "EmptyAfterKeyStripError",
    "InvalidPrimaryValueError",
    "PrimaryKeyInDataError",
    "InvalidConfigError",
    "SchemaError",
    "CompilationError",
]
