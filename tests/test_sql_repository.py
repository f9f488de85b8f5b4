"""
Smoke tests for the SQLUserRepository against a temporary SQLite database.
"""
from __future__ import annotations

import uuid

import pytest

from accounts.db.models import User
from accounts.repositories.base import DuplicateRecordError, RecordNotFoundError
from accounts.repositories.sql_repository import SQLUserRepository


def _user(email: str, **extra) -> User:
    return User(email=email, password="hash", uuid=str(uuid.uuid4()), **extra)


def test_create_applies_schema_defaults(temp_db):
    repo = SQLUserRepository(temp_db)
    user_id = repo.create(_user("alice@example.com"))

    user = repo.get_user_by_id(user_id)
    assert user.email == "alice@example.com"
    assert user.status == 1
    assert user.is_admin == 0
    assert user.created_at is not None
    assert user.updated_at is not None


def test_duplicate_email_is_rejected(temp_db):
    repo = SQLUserRepository(temp_db)
    repo.create(_user("dup@example.com"))

    with pytest.raises(DuplicateRecordError):
        repo.create(_user("dup@example.com"))


def test_lookups_by_phone_and_email(temp_db):
    repo = SQLUserRepository(temp_db)
    user_id = repo.create(_user("bob@example.com", phone=5511999990000, name="Bob"))

    assert repo.get_user_by_phone(5511999990000).id == user_id
    assert repo.get_user_by_email("bob@example.com").name == "Bob"
    with pytest.raises(RecordNotFoundError):
        repo.get_user_by_phone(1)
    with pytest.raises(RecordNotFoundError):
        repo.get_user_by_email("nobody@example.com")


def test_update_skips_protected_and_unset_columns(temp_db):
    repo = SQLUserRepository(temp_db)
    user_id = repo.create(_user("carol@example.com", name="Carol"))
    original = repo.get_user_by_id(user_id)

    repo.update(user_id, User(username="carol", status=0, uuid="not-allowed"))

    updated = repo.get_user_by_id(user_id)
    assert updated.username == "carol"
    assert updated.status == 0
    assert updated.name == "Carol"
    assert updated.uuid == original.uuid


def test_update_unknown_id_raises(temp_db):
    repo = SQLUserRepository(temp_db)

    with pytest.raises(RecordNotFoundError):
        repo.update(404, User(name="ghost"))


def test_soft_delete_hides_user(temp_db):
    repo = SQLUserRepository(temp_db)
    keep = repo.create(_user("keep@example.com"))
    gone = repo.create(_user("gone@example.com"))

    repo.delete(gone)
    repo.delete(gone)

    with pytest.raises(RecordNotFoundError):
        repo.get_user_by_id(gone)
    assert [summary.id for summary in repo.get_user_list()] == [keep]
