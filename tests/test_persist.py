"""Unit tests for PersistenceFacade."""
from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from keyql.compile.base import PreparedStatement
from keyql.errors import (
    CompilationError,
    EmptyAfterKeyStripError,
    EmptyDataError,
    EmptyPrimaryKeyError,
    EmptyTableError,
    InvalidConfigError,
    InvalidInputError,
    InvalidPrimaryValueError,
    PrimaryKeyInDataError,
)
from keyql.persist.facade import PersistenceFacade
from tests.fixtures import ALL_DIALECTS

# ---------------------------------------------------------------------------
# INSERT
# ---------------------------------------------------------------------------


def test_insert_returns_prepared_statement(persist: PersistenceFacade):
    stmt = persist.insert("users", {"name": "John", "email": "john@x.com"}, "id")
    assert isinstance(stmt, PreparedStatement)
    assert stmt.dialect == "mysql"
    assert stmt.version is None


def test_insert_example(persist: PersistenceFacade):
    stmt = persist.insert("users", {"name": "John", "email": "john@x.com"}, "id")
    assert "INSERT INTO users" in stmt.sql
    assert stmt.sql.count("%s") == 2
    assert stmt.bindings == ("John", "john@x.com")


def test_insert_auto_increment_strips_primary_key(persist: PersistenceFacade):
    stmt = persist.insert(
        "users", {"id": 99, "name": "John", "email": "john@x.com"}, "id", True, "sqlite"
    )
    assert stmt.sql == "INSERT INTO users (name, email) VALUES (?, ?)"
    assert stmt.bindings == ("John", "john@x.com")


def test_insert_without_auto_increment_keeps_every_key_in_order(persist: PersistenceFacade):
    data = {"name": "John", "id": 99, "age": 30}
    stmt = persist.insert("users", data, "id", auto_increment=False, dialect="sqlite")
    assert stmt.sql == "INSERT INTO users (name, id, age) VALUES (?, ?, ?)"
    assert stmt.bindings == ("John", 99, 30)


def test_insert_does_not_mutate_caller_data(persist: PersistenceFacade):
    data = {"id": 99, "name": "John"}
    persist.insert("users", data, "id")
    assert data == {"id": 99, "name": "John"}


def test_insert_auto_increment_without_key_in_data(persist: PersistenceFacade):
    stmt = persist.insert("users", {"name": "John"}, "id", True)
    assert stmt.bindings == ("John",)


def test_insert_keeps_none_values(persist: PersistenceFacade):
    stmt = persist.insert("users", {"name": "John", "age": None}, "id", dialect="sqlite")
    assert stmt.bindings == ("John", None)


def test_insert_empty_data_raises(persist: PersistenceFacade):
    with pytest.raises(EmptyDataError, match="Data cannot be empty for INSERT"):
        persist.insert("users", {}, "id")


def test_insert_empty_table_raises(persist: PersistenceFacade):
    with pytest.raises(EmptyTableError, match="Table name cannot be empty"):
        persist.insert("", {"name": "John"}, "id")


def test_insert_empty_data_checked_before_table(persist: PersistenceFacade):
    with pytest.raises(EmptyDataError):
        persist.insert("", {}, "id")


def test_insert_only_primary_key_with_auto_increment_raises(persist: PersistenceFacade):
    with pytest.raises(EmptyAfterKeyStripError, match="after removing auto-increment"):
        persist.insert("users", {"id": 99}, "id", True)


def test_insert_only_primary_key_without_auto_increment(persist: PersistenceFacade):
    stmt = persist.insert("users", {"id": 99}, "id", False)
    assert stmt.bindings == (99,)


@pytest.mark.parametrize("dialect", ALL_DIALECTS)
def test_insert_supports_every_dialect(persist: PersistenceFacade, dialect: str):
    stmt = persist.insert("users", {"name": "Jane", "email": "jane@x.com"}, "id", True, dialect)
    assert "INSERT INTO users" in stmt.sql
    assert stmt.dialect == dialect


# ---------------------------------------------------------------------------
# UPDATE
# ---------------------------------------------------------------------------


def test_update_example(persist: PersistenceFacade):
    stmt = persist.update("users", {"name": "John", "age": 31}, "id", 42)
    assert "SET" in stmt.sql
    assert "WHERE" in stmt.sql
    assert "id" in stmt.sql
    assert stmt.bindings == ("John", 31, 42)


def test_update_sqlite_sql(persist: PersistenceFacade):
    stmt = persist.update("users", {"name": "John", "age": 31}, "id", 42, "sqlite")
    assert stmt.sql == "UPDATE users SET name = ?, age = ? WHERE id = ?"


def test_update_string_primary_key(persist: PersistenceFacade):
    stmt = persist.update("users", {"name": "John"}, "uuid", "abc-123-def", "mysql")
    assert stmt.bindings == ("John", "abc-123-def")


def test_update_zero_primary_value_is_valid(persist: PersistenceFacade):
    stmt = persist.update("users", {"name": "John"}, "id", 0)
    assert stmt.bindings == ("John", 0)


def test_update_empty_data_raises(persist: PersistenceFacade):
    with pytest.raises(EmptyDataError, match="Data cannot be empty for UPDATE"):
        persist.update("users", {}, "id", 42)


def test_update_empty_table_raises(persist: PersistenceFacade):
    with pytest.raises(EmptyTableError):
        persist.update("", {"name": "John"}, "id", 42)


def test_update_empty_primary_key_raises(persist: PersistenceFacade):
    with pytest.raises(EmptyPrimaryKeyError):
        persist.update("users", {"name": "John"}, "", 42)


@pytest.mark.parametrize("primary_value", [None, ""])
def test_update_invalid_primary_value_raises(persist: PersistenceFacade, primary_value):
    with pytest.raises(InvalidPrimaryValueError, match="cannot be None or empty"):
        persist.update("users", {"name": "John"}, "id", primary_value)


@pytest.mark.parametrize(
    "data",
    [{"id": 99, "name": "John"}, {"id": 99}, {"name": "John", "id": None}],
)
def test_update_primary_key_in_data_raises(persist: PersistenceFacade, data):
    with pytest.raises(PrimaryKeyInDataError, match='Cannot update primary key "id"'):
        persist.update("users", data, "id", 42)


@pytest.mark.parametrize("dialect", ALL_DIALECTS)
def test_update_supports_every_dialect(persist: PersistenceFacade, dialect: str):
    stmt = persist.update("users", {"name": "John Updated"}, "id", 42, dialect)
    assert stmt.sql.startswith("UPDATE users SET")
    assert stmt.dialect == dialect


# ---------------------------------------------------------------------------
# DELETE
# ---------------------------------------------------------------------------


def test_delete_example(persist: PersistenceFacade):
    stmt = persist.delete("users", "id", 42)
    assert stmt.sql == "DELETE FROM users WHERE id = %s"
    assert stmt.bindings == (42,)


@pytest.mark.parametrize("primary_value", [42, "abc-123-def", 0])
def test_delete_has_exactly_one_binding(persist: PersistenceFacade, primary_value):
    stmt = persist.delete("users", "uuid", primary_value)
    assert stmt.bindings == (primary_value,)


def test_delete_empty_table_raises(persist: PersistenceFacade):
    with pytest.raises(EmptyTableError):
        persist.delete("", "id", 42)


@pytest.mark.parametrize("primary_value", [None, ""])
def test_delete_invalid_primary_value_raises(persist: PersistenceFacade, primary_value):
    with pytest.raises(InvalidPrimaryValueError):
        persist.delete("users", "id", primary_value)


@pytest.mark.parametrize("dialect", ALL_DIALECTS)
def test_delete_supports_every_dialect(persist: PersistenceFacade, dialect: str):
    stmt = persist.delete("users", "id", 42, dialect)
    assert stmt.sql.startswith("DELETE FROM users")
    assert stmt.dialect == dialect


# ---------------------------------------------------------------------------
# Dialect / version pass-through
# ---------------------------------------------------------------------------


def test_version_is_carried_on_every_statement(persist: PersistenceFacade):
    statements = [
        persist.insert("users", {"name": "John"}, "id", True, "mysql", "8.0"),
        persist.update("users", {"name": "Jane"}, "id", 42, "mysql", "8.0"),
        persist.delete("users", "id", 42, "mysql", "8.0"),
    ]
    assert [s.version for s in statements] == ["8.0", "8.0", "8.0"]
    assert [s.dialect for s in statements] == ["mysql", "mysql", "mysql"]


def test_unknown_dialect_raises_compilation_error(persist: PersistenceFacade):
    with pytest.raises(CompilationError, match="Unsupported dialect: 'oracle'"):
        persist.delete("users", "id", 42, "oracle")


def test_non_string_version_raises_invalid_config(persist: PersistenceFacade):
    with pytest.raises(InvalidConfigError) as exc_info:
        persist.delete("users", "id", 42, "mysql", 8.0)  # type: ignore[arg-type]
    assert exc_info.value.code == "INVALID_CONFIG"
    assert exc_info.value.details["errors"][0]["loc"][0] == "version"


def test_input_errors_take_precedence_over_config_errors(persist: PersistenceFacade):
    with pytest.raises(EmptyTableError):
        persist.delete("", "id", 42, "oracle")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def test_built_statement_is_logged_without_values(persist: PersistenceFacade):
    with capture_logs() as logs:
        persist.insert("users", {"name": "John", "password": "hunter2"}, "id", dialect="sqlite")
    [entry] = [e for e in logs if e["event"] == "statement_built"]
    assert entry["log_level"] == "debug"
    assert entry["operation"] == "insert"
    assert entry["columns"] == ["name", "password"]
    assert entry["binding_count"] == 2
    assert "hunter2" not in repr(entry)


def test_rejected_input_is_logged_and_reraised(persist: PersistenceFacade):
    with capture_logs() as logs, pytest.raises(InvalidInputError):
        persist.update("users", {"id": 1}, "id", 42)
    [entry] = [e for e in logs if e["event"] == "persist_input_rejected"]
    assert entry["code"] == "PRIMARY_KEY_IN_DATA"
    assert entry["operation"] == "update"


def test_events_flow_through_stdlib_logging(persist: PersistenceFacade, caplog):
    caplog.set_level(logging.DEBUG, logger="keyql")
    persist.delete("users", "id", 42, "sqlite")
    [record] = [r for r in caplog.records if "statement_built" in r.getMessage()]
    assert record.name == "keyql.persist.facade"
    assert record.levelno == logging.DEBUG


def test_unconfigured_process_prints_nothing():
    code = (
        "from keyql import PersistenceFacade\n"
        "p = PersistenceFacade()\n"
        "p.insert('users', {'name': 'x'}, 'id', dialect='sqlite')\n"
        "try:\n"
        "    p.update('users', {'id': 1}, 'id', 1)\n"
        "except Exception:\n"
        "    pass\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        cwd=Path(__file__).resolve().parents[1],
        check=True,
    )
    assert result.stdout == ""
    assert result.stderr == ""
