"""keyQL configuration and table metadata models: PersistConfig, TableKey."""
from keyql.schema.config import DEFAULT_DIALECT, PersistConfig
from keyql.schema.table_key import TableKey

__all__ = [
    "DEFAULT_DIALECT",
    "PersistConfig",
    "TableKey",
]
