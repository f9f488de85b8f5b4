"""Database helpers (engine/session export)."""

from .session import Base, create_db_engine, make_sessionmaker

__all__ = ["Base", "create_db_engine", "make_sessionmaker"]
