"""User registration, login and token lookup."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from ..core.errors import DuplicateError, InvalidCredentials, ValidationError
from ..core.security import PasswordHasher, TokenIssuer
from ..records import UserRecords
from ..schemas import AuthOut, UserPublic

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "User with this email already exists"


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def authenticate(
    users: UserRecords, hasher: PasswordHasher, tokens: TokenIssuer, *, email: str, password: str
) -> AuthOut:
    # Same error for unknown email and wrong password
    u = users.find_by_email(_normalize_email(email))
    if not u or not hasher.verify(password or "", u.password_hash):
        raise InvalidCredentials("Invalid credentials")
    token = tokens.issue(user_id=str(u.id), email=u.email)
    return AuthOut(user=UserPublic(id=str(u.id), username=u.username, email=u.email), token=token)


def register(
    users: UserRecords,
    hasher: PasswordHasher,
    tokens: TokenIssuer,
    *,
    username: str,
    email: str,
    password: str,
) -> AuthOut:
    username = (username or "").strip()
    email = _normalize_email(email)
    if not username or not email or not password:
        raise ValidationError("All fields are required")
    if users.find_by_email(email):
        raise DuplicateError(DUPLICATE_EMAIL)
    try:
        user = users.create(username=username, email=email, password_hash=hasher.hash(password))
    except IntegrityError as exc:
        # Lost a race with a concurrent signup for the same email
        raise DuplicateError(DUPLICATE_EMAIL) from exc
    logger.info("Registered user %s", user.id)
    return AuthOut(user=user, token=tokens.issue(user_id=user.id, email=user.email))


def current_user(users: UserRecords, tokens: TokenIssuer, token: str) -> UserPublic:
    data = tokens.decode(token)
    user = users.get(str(data["sub"]))
    if not user:
        raise InvalidCredentials("Could not validate credentials")
    return user
