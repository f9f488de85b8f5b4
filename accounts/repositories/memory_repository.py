"""In-process user storage, used by tests and local tooling."""
from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from accounts.db.models import User

from .base import (
    DuplicateRecordError,
    RecordNotFoundError,
    UserSummary,
    update_values,
)


def _copy(user: User) -> User:
    return User(**{column.key: getattr(user, column.key) for column in User.__table__.columns})


class MemoryUserRepository:
    """Dict-backed repository mirroring ``SQLUserRepository`` semantics."""

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self.closed = False

    def _find(self, predicate: Callable[[User], bool]) -> Optional[User]:
        for user in self._users.values():
            if user.deleted_at is None and predicate(user):
                return user
        return None

    def _check_unique(self, user: User, *, skip_id: Optional[int] = None) -> None:
        for other in self._users.values():
            if other.id == skip_id:
                continue
            if user.email is not None and other.email == user.email:
                raise DuplicateRecordError(f"user already exists: {user.email}")
            if user.phone is not None and other.phone == user.phone:
                raise DuplicateRecordError(f"phone already in use: {user.phone}")

    def _one(self, predicate: Callable[[User], bool], description: str) -> User:
        with self._lock:
            user = self._find(predicate)
            if user is None:
                raise RecordNotFoundError(f"record not found: {description}")
            return _copy(user)

    def create(self, user: User) -> int:
        now = datetime.now(timezone.utc)
        with self._lock:
            self._check_unique(user)
            stored = _copy(user)
            stored.id = self._next_id
            stored.status = 1 if stored.status is None else stored.status
            stored.is_admin = stored.is_admin or 0
            stored.created_at = stored.created_at or now
            stored.updated_at = stored.updated_at or now
            self._users[stored.id] = stored
            self._next_id += 1
        user.id = stored.id
        return stored.id

    def delete(self, user_id: int) -> None:
        now = datetime.now(timezone.utc)
        with self._lock:
            user = self._users.get(user_id)
            if user is not None and user.deleted_at is None:
                user.deleted_at = now
                user.updated_at = now

    def update(self, user_id: int, user: User) -> None:
        values = update_values(user)
        with self._lock:
            stored = self._users.get(user_id)
            if stored is None or stored.deleted_at is not None:
                raise RecordNotFoundError(f"record not found: id={user_id}")
            self._check_unique(User(email=values.get("email"), phone=values.get("phone")), skip_id=user_id)
            for key, value in values.items():
                setattr(stored, key, value)
            stored.updated_at = datetime.now(timezone.utc)

    def get_user_by_id(self, user_id: int) -> User:
        return self._one(lambda u: u.id == user_id, f"id={user_id}")

    def get_user_by_phone(self, phone: int) -> User:
        return self._one(lambda u: u.phone == phone, f"phone={phone}")

    def get_user_by_email(self, email: str) -> User:
        return self._one(lambda u: u.email == email, f"email={email}")

    def get_user_list(self) -> list[UserSummary]:
        with self._lock:
            active = [u for u in self._users.values() if u.deleted_at is None]
            return [UserSummary.from_user(u) for u in sorted(active, key=lambda u: u.id)]

    def close(self) -> None:
        self.closed = True
