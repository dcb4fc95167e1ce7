"""Tests for password hashing and tokens."""

from datetime import datetime, timezone

import jwt
import pytest

from fittrack.core.config import Settings
from fittrack.core.errors import InvalidCredentials, ValidationError
from fittrack.core.security import PasswordHasher, TokenIssuer


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return TokenIssuer(Settings(SECRET_KEY="test-secret"))


def test_hash_is_salted_and_verifies(hasher):
    a = hasher.hash("secret1")
    b = hasher.hash("secret1")
    assert a != b
    assert "secret1" not in a
    assert hasher.verify("secret1", a)
    assert not hasher.verify("secret2", a)


def test_verify_malformed_hash(hasher):
    assert hasher.verify("secret1", "not-a-hash") is False


def test_token_carries_user_and_expires_in_a_day(tokens):
    token = tokens.issue(user_id="abc", email="john@example.com")
    data = tokens.decode(token)
    assert data["sub"] == "abc"
    assert data["email"] == "john@example.com"
    assert data["exp"] - data["iat"] == 24 * 60 * 60


def test_token_signed_with_other_key_rejected(tokens):
    forged = jwt.encode({"sub": "abc", "exp": datetime.now(timezone.utc).timestamp() + 60}, "other", algorithm="HS256")
    with pytest.raises(InvalidCredentials):
        tokens.decode(forged)


def test_expired_token_rejected():
    expired = TokenIssuer(Settings(SECRET_KEY="k", ACCESS_TOKEN_EXPIRE_MINUTES=-1))
    token = expired.issue(user_id="abc", email="a@example.com")
    with pytest.raises(InvalidCredentials):
        expired.decode(token)


def test_hash_rejects_password_over_bcrypt_limit(hasher):
    with pytest.raises(ValidationError):
        hasher.hash("a" * 73)


def test_verify_refuses_password_over_bcrypt_limit(hasher):
    stored = hasher.hash("a" * 72)
    assert hasher.verify("a" * 72, stored)
    assert not hasher.verify("a" * 72 + "b", stored)
