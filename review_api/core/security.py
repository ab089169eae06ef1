# File: review_api/core/security.py

"""
Security helpers for the Movie Review API.

  - Password hashing (bcrypt, fixed work factor)
  - Access tokens (HS256 JWT carrying the user id in `sub`, 24h expiry)
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
import jwt

from review_api.core.config import settings


ALGORITHM = settings.algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes
SECRET_KEY = settings.secret_key

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class InvalidToken(Exception):
    """Base class for access token validation failures."""


class TokenExpired(InvalidToken):
    pass


class InvalidSignature(InvalidToken):
    pass


class MalformedToken(InvalidToken):
    pass


# ---------- PASSWORDS ----------

def _password_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plaintext: str, rounds: Optional[int] = None) -> str:
    """
    Return a salted bcrypt digest of `plaintext`.
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.password_hash_rounds)
    return bcrypt.hashpw(_password_bytes(plaintext), salt).decode("utf-8")


def verify_password(plaintext: str, digest: Optional[str]) -> bool:
    """
    Check `plaintext` against a stored digest.

    A missing or malformed digest is a mismatch, not an error.
    """
    if not plaintext or not digest:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(plaintext), digest.encode("utf-8"))
    except ValueError:
        return False


def generate_placeholder_password() -> str:
    return secrets.token_urlsafe(32)


# ---------- ACCESS TOKENS ----------

def create_access_token(
    subject: str,
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode: dict[str, Any] = {
        "sub": str(subject),
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, secret_key or SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str, secret_key: Optional[str] = None) -> str:
    """
    Verify signature and expiry of an access token and return its subject.

    Raises TokenExpired, InvalidSignature or MalformedToken.
    """
    try:
        payload = jwt.decode(
            token,
            secret_key or SECRET_KEY,
            algorithms=[ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpired("Token has expired") from exc
    except jwt.InvalidSignatureError as exc:
        raise InvalidSignature("Invalid token signature") from exc
    except jwt.InvalidTokenError as exc:
        raise MalformedToken(str(exc)) from exc

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise MalformedToken("Token has no subject")
    return subject
