from __future__ import annotations

from accounts.core.security import hash_password, verify_password


def test_hash_is_prefixed_and_not_plaintext():
    hashed = hash_password("pw123")

    assert hashed != "pw123"
    assert hashed.startswith("argon2$")


def test_hash_is_salted():
    assert hash_password("pw123") != hash_password("pw123")


def test_verify_password_accepts_matching_password():
    hashed = hash_password("pw123")

    assert verify_password("pw123", hashed) is True
    assert verify_password("wrong", hashed) is False


def test_verify_password_rejects_missing_or_foreign_hashes():
    assert verify_password("pw123", None) is False
    assert verify_password("pw123", "") is False
    assert verify_password("pw123", "pw123") is False
    assert verify_password("pw123", "argon2$not-a-real-hash") is False
