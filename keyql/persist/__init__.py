"""keyQL persistence facade."""
from keyql.persist.facade import PersistenceFacade

__all__ = ["PersistenceFacade"]
