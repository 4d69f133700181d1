"""
Route protection dependencies: bearer authentication, verification and role gates
"""
import logging
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from venuebook.core.database import get_db
from venuebook.core.security import decode_access_token
from venuebook.models.user import User, UserRole

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the user behind the bearer token"""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_access_token(credentials.credentials)
        user_id = int(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, ValueError) as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


async def require_verified(user: User = Depends(get_current_user)) -> User:
    """Allow only users that confirmed their OTP"""
    if not user.is_verified:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="account not verified",
        )
    return user


def require_role(role: UserRole):
    """Factory function to create a role check dependency"""
    async def check_role(user: User = Depends(require_verified)) -> User:
        if user.role != role:
            logger.warning(f"User {user.id} with role {user.role.value} denied {role.value} route")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="access denied",
            )
        return user
    return check_role


require_owner = require_role(UserRole.OWNER)
require_player = require_role(UserRole.USER)
