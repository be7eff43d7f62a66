"""keyQL utilities."""
