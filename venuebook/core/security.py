"""Password hashing, bearer tokens and OTP generation."""
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

import bcrypt
import jwt

from venuebook.core.config import settings


def hash_password(password: str) -> str:
    """Hash a plain password with bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain password against a stored bcrypt hash."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    user_id: int,
    role: str,
    expires_minutes: Optional[int] = None,
) -> Tuple[str, datetime]:
    """
    Issue a signed bearer token for a user.

    Args:
        user_id: ID of the authenticated user
        role: Role of the user, embedded as a claim
        expires_minutes: Lifetime override, defaults to settings

    Returns:
        Encoded token and its expiry time
    """
    now = datetime.now(timezone.utc)
    lifetime = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expires_at = now + timedelta(minutes=lifetime)
    payload = {
        "sub": str(user_id),
        "role": role,
        "iat": now,
        "exp": expires_at,
    }
    token = jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return token, expires_at


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a bearer token.

    Raises:
        jwt.InvalidTokenError: If the token is malformed, tampered with or expired
    """
    return jwt.decode(
        token,
        settings.SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )


def generate_otp_code() -> int:
    """Return a random six digit code."""
    return 100000 + secrets.randbelow(900000)
