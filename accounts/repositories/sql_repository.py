"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from sqlalchemy import select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from accounts.db.models import User
from accounts.db.session import create_db_engine, make_sessionmaker

from .base import (
    DuplicateRecordError,
    RecordNotFoundError,
    UserSummary,
    update_values,
)

logger = logging.getLogger(__name__)


class SQLUserRepository:
    """CRUD helpers wrapping a SQLAlchemy engine owned by this repository."""

    def __init__(self, engine: Engine):
        self._engine = engine
        self._sessionmaker = make_sessionmaker(engine)

    @classmethod
    def from_settings(cls, url: Optional[str] = None) -> "SQLUserRepository":
        return cls(create_db_engine(url))

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        session: Session = self._sessionmaker()
        try:
            yield session
        finally:
            session.close()

    def _active(self):
        return select(User).where(User.deleted_at.is_(None))

    def _one(self, stmt, description: str) -> User:
        with self.get_session() as session:
            user = session.execute(stmt).scalar_one_or_none()
        if user is None:
            raise RecordNotFoundError(f"record not found: {description}")
        return user

    # -------------------------- writes --------------------------
    def create(self, user: User) -> int:
        now = datetime.now(timezone.utc)
        user.created_at = user.created_at or now
        user.updated_at = user.updated_at or now
        with self.get_session() as session:
            session.add(user)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateRecordError(f"user already exists: {user.email}") from exc
            session.refresh(user)
            logger.debug("inserted user id=%s", user.id)
            return user.id

    def delete(self, user_id: int) -> None:
        now = datetime.now(timezone.utc)
        with self.get_session() as session:
            stmt = (
                update(User)
                .where(User.id == user_id, User.deleted_at.is_(None))
                .values(deleted_at=now, updated_at=now)
            )
            session.execute(stmt)
            session.commit()

    def update(self, user_id: int, user: User) -> None:
        values = update_values(user)
        values["updated_at"] = datetime.now(timezone.utc)
        with self.get_session() as session:
            stmt = update(User).where(User.id == user_id, User.deleted_at.is_(None)).values(**values)
            try:
                result = session.execute(stmt)
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateRecordError(f"update conflicts with an existing user: id={user_id}") from exc
        if result.rowcount == 0:
            raise RecordNotFoundError(f"record not found: id={user_id}")

    # -------------------------- reads --------------------------
    def get_user_by_id(self, user_id: int) -> User:
        return self._one(self._active().where(User.id == user_id), f"id={user_id}")

    def get_user_by_phone(self, phone: int) -> User:
        return self._one(self._active().where(User.phone == phone), f"phone={phone}")

    def get_user_by_email(self, email: str) -> User:
        return self._one(self._active().where(User.email == email), f"email={email}")

    def get_user_list(self) -> list[UserSummary]:
        with self.get_session() as session:
            users = session.execute(self._active().order_by(User.id)).scalars().all()
            return [UserSummary.from_user(user) for user in users]

    def close(self) -> None:
        self._engine.dispose()
