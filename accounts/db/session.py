"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from accounts.core.config import get_settings

Base = declarative_base()


def create_db_engine(url: Optional[str] = None) -> Engine:
    """Build a pooled engine for ``url`` (default: ``DATABASE_URL``)."""
    value = (url or get_settings().database_url or "").strip()
    if not value:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return create_engine(value, future=True, pool_pre_ping=True)


def make_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)
