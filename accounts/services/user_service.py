"""
User account use cases: CRUD, registration and email login.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from argon2 import exceptions as argon_exc
from sqlalchemy.exc import SQLAlchemyError

from accounts.core.security import hash_password, verify_password
from accounts.core.tokens import TokenClaims, TokenSigningError, sign_token
from accounts.db.models import User
from accounts.repositories.base import (
    RecordNotFoundError,
    RepositoryError,
    UserRepository,
    UserSummary,
)
from accounts.repositories.sql_repository import SQLUserRepository

logger = logging.getLogger(__name__)

_STORAGE_ERRORS = (RepositoryError, SQLAlchemyError)


class UserServiceError(Exception):
    """Base class for user service failures."""


class HashingError(UserServiceError):
    pass


class PersistenceError(UserServiceError):
    pass


class NotFoundError(PersistenceError):
    pass


class AuthenticationError(UserServiceError):
    pass


class AccountDisabledError(UserServiceError):
    pass


class TokenError(UserServiceError):
    pass


def _lookup_error(exc: Exception, message: str) -> PersistenceError:
    if isinstance(exc, RecordNotFoundError):
        return NotFoundError(message)
    return PersistenceError(message)


@dataclass
class UserService:
    """Facade over a ``UserRepository`` plus password hashing and token signing."""

    repository: UserRepository
    token_secret: str = ""

    @classmethod
    def from_settings(cls, database_url: Optional[str] = None) -> "UserService":
        return cls(repository=SQLUserRepository.from_settings(database_url))

    # -------------------------------------- helpers --------------------------------------
    def _new_user(self, email: str, password: str, name: str | None = None, status: int | None = None) -> User:
        try:
            pwd = hash_password(password)
        except argon_exc.HashingError as exc:
            raise HashingError("encrypt password err") from exc
        # Unset columns (timestamps, status on register) fall back to repository defaults.
        user = User(password=pwd, email=email, uuid=str(uuid.uuid4()))
        if name is not None:
            user.name = name
        if status is not None:
            user.status = status
        return user

    def _insert(self, user: User) -> None:
        try:
            user_id = self.repository.create(user)
        except _STORAGE_ERRORS as exc:
            raise PersistenceError(f"create user: {exc}") from exc
        logger.info("created user id=%s", user_id)

    # -------------------------------------- writes --------------------------------------
    def create(self, email: str, password: str, name: str, status: int) -> None:
        self._insert(self._new_user(email, password, name=name, status=status))

    def register(self, email: str, password: str) -> None:
        self._insert(self._new_user(email, password))

    def delete(self, user_id: int) -> None:
        try:
            self.repository.delete(user_id)
        except _STORAGE_ERRORS as exc:
            raise PersistenceError(f"delete user fail: {exc}") from exc
        logger.info("deleted user id=%s", user_id)

    def update_user(self, user_id: int, user: User) -> None:
        self.repository.update(user_id, user)

    # -------------------------------------- login --------------------------------------
    def email_login(self, email: str, password: str) -> str:
        try:
            user = self.get_user_by_email(email)
        except NotFoundError as exc:
            raise NotFoundError(f"get user info err by email: {exc}") from exc
        except PersistenceError as exc:
            raise PersistenceError(f"get user info err by email: {exc}") from exc

        if not verify_password(password, user.password):
            logger.info("password mismatch for user id=%s", user.id)
            raise AuthenticationError("password compare err")

        if not user.status:
            logger.info("login refused for disabled user id=%s", user.id)
            raise AccountDisabledError("user not allow")

        claims = TokenClaims(
            user_id=user.id,
            username=user.username or "",
            uuid=user.uuid,
            email=user.email,
            is_admin=user.is_admin or 0,
        )
        try:
            return sign_token(claims, self.token_secret)
        except TokenSigningError as exc:
            raise TokenError(f"gen token sign err: {exc}") from exc

    # -------------------------------------- reads --------------------------------------
    def get_user_by_id(self, user_id: int) -> User:
        try:
            return self.repository.get_user_by_id(user_id)
        except _STORAGE_ERRORS as exc:
            raise _lookup_error(exc, f"get user info err from db by id: {user_id}") from exc

    def get_user_by_phone(self, phone: int) -> User:
        try:
            return self.repository.get_user_by_phone(phone)
        except _STORAGE_ERRORS as exc:
            raise _lookup_error(exc, f"get user info err from db by phone: {phone}") from exc

    def get_user_by_email(self, email: str) -> User:
        try:
            return self.repository.get_user_by_email(email)
        except _STORAGE_ERRORS as exc:
            raise _lookup_error(exc, f"get user info err from db by email: {email}") from exc

    def get_user_list(self) -> list[UserSummary]:
        return self.repository.get_user_list()

    def close(self) -> None:
        self.repository.close()
