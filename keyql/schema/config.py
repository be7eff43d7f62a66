"""Pydantic model for the dialect configuration of a statement build.

``PersistConfig`` is the explicit configuration struct shared by the
persistence facade and the statement builders::

    from keyql import PersistConfig

    PersistConfig()                                # mysql, default version
    PersistConfig(dialect="postgres", version="16")

The dialect name is resolved through
:class:`~keyql.compile.registry.CompilerFactory` at build time, so
custom dialects registered there are accepted here without changes.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

#: Dialect used when the caller does not name one.
DEFAULT_DIALECT = "mysql"


class PersistConfig(BaseModel):
    """Target dialect and optional server version for a statement build.

    Attributes:
        dialect: Registered dialect name (``'mysql'``, ``'postgres'``,
            ``'sqlite'``, or a custom registration).
        version: Database server version (e.g. ``'8.0'``).  ``None`` means
            the compiler's default.  Passed through verbatim.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    dialect: str = DEFAULT_DIALECT
    version: str | None = None
