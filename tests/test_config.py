"""Unit tests for PersistConfig, TableKey, error responses and logging setup."""
from __future__ import annotations

import logging

import pytest
import structlog
from pydantic import ValidationError

from keyql.errors import EmptyTableError, KeyQLError, PrimaryKeyInDataError
from keyql.schema.config import DEFAULT_DIALECT, PersistConfig
from keyql.schema.table_key import TableKey
from keyql.utils.logging import configure_logging, get_logger


def test_config_defaults():
    config = PersistConfig()
    assert config.dialect == DEFAULT_DIALECT == "mysql"
    assert config.version is None


def test_config_is_frozen():
    config = PersistConfig(dialect="sqlite")
    with pytest.raises(ValidationError):
        config.dialect = "mysql"  # type: ignore[misc]


def test_config_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        PersistConfig(dialect="sqlite", placeholders=False)  # type: ignore[call-arg]


def test_config_rejects_non_string_version():
    with pytest.raises(ValidationError):
        PersistConfig(version=8)  # type: ignore[arg-type]


def test_table_key_requires_names():
    with pytest.raises(ValidationError):
        TableKey(table="", primary_key="id")
    key = TableKey(table="users", primary_key="id")
    assert key.auto_increment is True


def test_error_response_shape():
    err = PrimaryKeyInDataError("id")
    assert err.to_error_response() == {
        "error": "PRIMARY_KEY_IN_DATA",
        "message": 'Cannot update primary key "id". Remove it from data.',
        "details": {"primary_key": "id"},
    }


def test_errors_share_a_base_class():
    assert isinstance(EmptyTableError(), KeyQLError)
    assert EmptyTableError().details == {}


def test_configure_logging_sets_level(reset_logging):
    configure_logging(level="debug", json_output=True)
    assert logging.getLogger().getEffectiveLevel() <= logging.DEBUG
    assert structlog.is_configured()


def test_configure_logging_unknown_level_falls_back(reset_logging):
    configure_logging(level="chatty")
    assert logging.getLogger().level == logging.INFO


def test_get_logger_returns_structlog_logger():
    logger = get_logger("keyql.tests")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "bind")
