from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(user_id: UUID, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User UUID
        email: User email
        expires_delta: Token lifetime, JWT_EXPIRES_MINUTES when omitted

    Returns:
        JWT token string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=ApplicationConfig.JWT_EXPIRES_MINUTES)

    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "email": email,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=[ApplicationConfig.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        return None
