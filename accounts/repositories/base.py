"""Repository contract shared by every user storage backend."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol

from accounts.db.models import User

# Columns a caller may never overwrite through ``update``.
PROTECTED_FIELDS = frozenset({"id", "uuid", "created_at", "updated_at", "deleted_at"})


class RepositoryError(Exception):
    """Base class for storage failures raised by repositories."""


class RecordNotFoundError(RepositoryError):
    pass


class DuplicateRecordError(RepositoryError):
    pass


@dataclass
class UserSummary:
    id: int
    name: Optional[str]
    email: str
    status: int
    is_admin: int
    created_at: Optional[datetime]

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            status=user.status,
            is_admin=user.is_admin,
            created_at=user.created_at,
        )


def update_values(user: User) -> dict:
    """Column values set on ``user`` that an update is allowed to write."""
    values = {}
    for column in User.__table__.columns:
        if column.key in PROTECTED_FIELDS:
            continue
        value = getattr(user, column.key)
        if value is not None:
            values[column.key] = value
    return values


class UserRepository(Protocol):
    def create(self, user: User) -> int: ...

    def delete(self, user_id: int) -> None: ...

    def update(self, user_id: int, user: User) -> None: ...

    def get_user_by_id(self, user_id: int) -> User: ...

    def get_user_by_phone(self, phone: int) -> User: ...

    def get_user_by_email(self, email: str) -> User: ...

    def get_user_list(self) -> list[UserSummary]: ...

    def close(self) -> None: ...
