"""keyQL input validation."""
from keyql.validate.validator import PersistValidator

__all__ = ["PersistValidator"]
