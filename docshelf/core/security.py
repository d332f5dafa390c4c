"""
Security Utilities

Admin password hashing and signed session tokens.

Tokens are HS256 JWTs carrying the admin id as ``sub`` and a ``type``
claim, so an access token can never be replayed as a refresh token
and vice versa:

    {"sub": "<admin uuid>", "type": "access", "exp": 1718000000}
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional
from uuid import UUID

import bcrypt
from jose import JWTError, jwt

from docshelf.config.settings import settings
from docshelf.core.utils import parse_uuid


ALGORITHM = "HS256"


class TokenType(str, Enum):
    """Kinds of admin session token."""

    ACCESS = "access"
    REFRESH = "refresh"


def _lifetime(token_type: TokenType) -> timedelta:
    if token_type is TokenType.REFRESH:
        return timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    return timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)


def hash_password(password: str) -> str:
    """Return the bcrypt hash of an admin password, as text."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check an admin password against the stored bcrypt hash."""
    return bcrypt.checkpw(password.encode(), password_hash.encode())


def issue_token(
    admin_id: UUID,
    token_type: TokenType,
    lifetime: Optional[timedelta] = None,
) -> str:
    """Sign a token for an admin.

    Args:
        admin_id: Admin the token authenticates
        token_type: Access or refresh
        lifetime: Override of the configured lifetime for this type

    Returns:
        Encoded JWT
    """
    expires_at = datetime.now(timezone.utc) + (lifetime or _lifetime(token_type))
    claims = {"sub": str(admin_id), "type": token_type.value, "exp": expires_at}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM)


def read_token(token: str, expected: TokenType) -> Optional[UUID]:
    """Verify a token and return the admin id it was issued for.

    Returns None when the signature is bad, the token has expired, it is
    of another type, or its subject is not a UUID.
    """
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None

    if claims.get("type") != expected.value:
        return None
    return parse_uuid(claims.get("sub"))
