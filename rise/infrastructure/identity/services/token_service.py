"""Access token creation and verification service."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError

from rise.config import get_settings
from rise.domain.identity.principal import DEFAULT_ROLE

settings = get_settings()
SECRET_KEY = settings.SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24 * 7


def create_access_token(
    user_id: int, role: str = DEFAULT_ROLE, expires_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES
) -> str:
    """
    Create an access token for a user.

    Tokens are normally minted by the identity provider; this is used by
    operational scripts and tests that share the same secret.
    """
    expire = datetime.now(UTC) + timedelta(minutes=expires_minutes)
    to_encode = {"sub": str(user_id), "role": role, "exp": expire, "type": "access"}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> tuple[int, str] | None:
    """Verify an access token and return (user_id, role) if valid."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        if payload.get("type") == "refresh":
            return None
        user_id = payload.get("sub")
        if user_id is None:
            return None
        user_id = int(user_id)
        if user_id <= 0:
            return None
        return user_id, str(payload.get("role") or DEFAULT_ROLE)
    except (InvalidTokenError, ValueError):
        return None
