"""Pydantic model describing how a table is addressed by primary key."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TableKey(BaseModel):
    """Primary-key metadata for one table.

    Attributes:
        table: Table name, optionally schema-qualified (``'public.users'``).
        primary_key: Name of the single primary key column.
        auto_increment: Whether the database assigns the key on INSERT.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    table: str = Field(min_length=1)
    primary_key: str = Field(min_length=1)
    auto_increment: bool = True
