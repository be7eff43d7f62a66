"""Shared pytest fixtures for keyQL unit and integration tests."""
from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator

import pytest
import structlog

from keyql.persist.facade import PersistenceFacade
from tests.fixtures import load_ddl


@pytest.fixture()
def persist() -> PersistenceFacade:
    return PersistenceFacade()


@pytest.fixture()
def sqlite_db() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite database with the sample ``users`` schema."""
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.executescript(load_ddl("sqlite"))
    yield conn
    conn.close()


@pytest.fixture()
def reset_logging() -> Iterator[None]:
    """Restore the root log level and structlog defaults after the test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    structlog.reset_defaults()
