"""Utilities for building a TableKey from SQLAlchemy metadata.

SQLAlchemy converter
--------------------
:func:`table_key_from_sqlalchemy` reads an existing
:class:`~sqlalchemy.schema.Table`; :func:`table_key_from_engine` reflects
one table from a live engine first.

Example::

    from sqlalchemy import create_engine
    from keyql import PersistenceFacade
    from keyql.schema.converters import table_key_from_engine

    engine = create_engine("sqlite:///mydb.db")
    key = table_key_from_engine(engine, "users")
    stmt = PersistenceFacade().insert(
        key.table, row, key.primary_key, key.auto_increment, dialect="sqlite"
    )
"""

from __future__ import annotations

from sqlalchemy import Engine, MetaData, Table
from sqlalchemy.exc import InvalidRequestError

from keyql.errors import SchemaError
from keyql.schema.table_key import TableKey


def table_key_from_sqlalchemy(table: Table) -> TableKey:
    """Build a :class:`TableKey` from a SQLAlchemy ``Table``.

    The primary key must consist of exactly one column.  It is treated as
    auto-increment when SQLAlchemy reports it as the table's
    ``autoincrement_column`` (e.g. an ``INTEGER PRIMARY KEY`` with the
    default ``autoincrement="auto"``).

    Args:
        table: A declared or reflected table.

    Returns:
        The table's :class:`TableKey`; ``table`` is schema-qualified when
        the SQLAlchemy table carries a schema.

    Raises:
        SchemaError: If the table has no primary key or a composite one.
    """
    pk_columns = list(table.primary_key.columns)
    if not pk_columns:
        raise SchemaError(f"Table '{table.fullname}' has no primary key.", table=table.fullname)
    if len(pk_columns) > 1:
        names = [col.name for col in pk_columns]
        raise SchemaError(
            f"Table '{table.fullname}' has a composite primary key {names}; "
            "a single-column key is required.",
            table=table.fullname,
        )

    pk = pk_columns[0]
    return TableKey(
        table=table.fullname,
        primary_key=pk.name,
        auto_increment=table.autoincrement_column is pk,
    )


def table_key_from_engine(
    engine: Engine,
    table_name: str,
    *,
    schema: str | None = None,
) -> TableKey:
    """Reflect ``table_name`` from ``engine`` and build its :class:`TableKey`.

    Args:
        engine: A connected :class:`sqlalchemy.engine.Engine` instance.
        table_name: Name of the table to reflect.
        schema: Optional database schema name (e.g. ``"public"``).

    Raises:
        SchemaError: If the table does not exist or its key is unusable.
    """
    key = f"{schema}.{table_name}" if schema else table_name
    metadata = MetaData()
    try:
        with engine.connect() as conn:
            metadata.reflect(bind=conn, only=[table_name], schema=schema)
    except InvalidRequestError as exc:
        raise SchemaError(f"Table '{key}' not found.", table=key) from exc
    table = metadata.tables[key]
    return table_key_from_sqlalchemy(table)
