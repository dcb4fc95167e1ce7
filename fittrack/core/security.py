# fittrack/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from passlib.context import CryptContext

from .config import Settings
from .errors import InvalidCredentials, ValidationError

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72

# OAuth2 bearer token (used by FastAPI dependency)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/user/login", auto_error=False)


class PasswordHasher:
    """bcrypt via passlib; every hash gets a fresh random salt."""

    def __init__(self, rounds: int = 10):
        self.pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, plain: str) -> str:
        if len(plain.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValidationError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return self.pwd_context.hash(plain)

    def verify(self, plain: str, hashed: str) -> bool:
        # No stored password is longer, so a longer one can only match by truncation
        if len(plain.encode("utf-8")) > BCRYPT_MAX_BYTES:
            return False
        try:
            return self.pwd_context.verify(plain, hashed)
        except (ValueError, TypeError):
            # Malformed stored hash
            return False


class TokenIssuer:
    def __init__(self, settings: Settings):
        self.secret = settings.SECRET_KEY
        self.algorithm = settings.ALGORITHM
        self.ttl = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    def issue(self, *, user_id: str, email: str) -> str:
        """
        Create a JWT with subject (user id) and email.
        Tokens expire after ACCESS_TOKEN_EXPIRE_MINUTES (24h by default).
        """
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "email": email,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        try:
            data = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as exc:
            # Any decode/validation error → unauthorized
            raise InvalidCredentials("Could not validate credentials") from exc
        if not data.get("sub"):
            raise InvalidCredentials("Could not validate credentials")
        return data


def bearer_token(token: str | None = Depends(oauth2_scheme)) -> str:
    if not token:
        raise InvalidCredentials("Not authenticated")
    return token
