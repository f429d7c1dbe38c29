"""SQL persistence (async SQLAlchemy)."""
