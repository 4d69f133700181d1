"""Authentication service: registration, login and OTP confirmation."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Tuple

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from venuebook.core.config import settings
from venuebook.core.security import (
    create_access_token,
    generate_otp_code,
    hash_password,
    verify_password,
)
from venuebook.models.otp_code import OtpCode
from venuebook.models.user import User
from venuebook.schemas.auth import RegisterRequest
from venuebook.services.mailer import MailerError, mailer

logger = logging.getLogger(__name__)


class AuthError(ValueError):
    """Base class for authentication failures."""
    pass


class EmailAlreadyRegistered(AuthError):
    pass


class InvalidCredentials(AuthError):
    pass


class UserNotFound(AuthError):
    pass


class InvalidOtp(AuthError):
    pass


class AuthService:
    """Service for managing user accounts."""

    async def register(self, db: AsyncSession, data: RegisterRequest) -> Tuple[User, OtpCode]:
        """
        Create a user, store a fresh OTP code and email it.

        Args:
            db: Database session
            data: Registration payload

        Returns:
            The created user and its OTP row

        Raises:
            EmailAlreadyRegistered: If the email is already taken
            MailerError: If the OTP email cannot be delivered
        """
        result = await db.execute(select(User).where(User.email == data.email))
        if result.scalar_one_or_none():
            raise EmailAlreadyRegistered(f"Email {data.email} is already registered")

        user = User(
            name=data.name,
            email=data.email,
            password=hash_password(data.password),
            role=data.role,
            is_verified=False,
        )
        db.add(user)
        await db.flush()

        otp = OtpCode(otp_code=generate_otp_code(), user_id=user.id)
        db.add(otp)
        await db.flush()

        try:
            await mailer.send_otp_email(user.email, user.name, otp.otp_code)
        except MailerError:
            await db.rollback()
            raise

        await db.commit()
        logger.info(f"Registered user {user.id} ({user.role.value})")

        return user, otp

    async def login(self, db: AsyncSession, email: str, password: str) -> Tuple[str, datetime]:
        """
        Check credentials and issue a bearer token.

        Raises:
            InvalidCredentials: If the email is unknown or the password is wrong
        """
        result = await db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()

        if not user or not verify_password(password, user.password):
            raise InvalidCredentials("Invalid user credentials")

        return create_access_token(user.id, user.role.value)

    async def confirm_otp(self, db: AsyncSession, email: str, otp_code: int) -> User:
        """
        Mark a user as verified when the OTP code matches.

        The code must belong to the user owning the email. A used code is
        deleted together with any other pending codes of that user.

        Raises:
            UserNotFound: If no user has this email
            InvalidOtp: If the code does not match or has expired
        """
        result = await db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()

        if not user:
            raise UserNotFound(f"Email {email} not found")

        result = await db.execute(
            select(OtpCode)
            .where(OtpCode.user_id == user.id, OtpCode.otp_code == otp_code)
            .order_by(OtpCode.id.desc())
        )
        otp = result.scalars().first()

        if not otp:
            raise InvalidOtp("OTP verification failed")

        if self._is_expired(otp):
            raise InvalidOtp("OTP code has expired")

        user.is_verified = True
        await db.execute(delete(OtpCode).where(OtpCode.user_id == user.id))
        await db.commit()

        logger.info(f"User {user.id} verified")
        return user

    def _is_expired(self, otp: OtpCode) -> bool:
        """Check an OTP row against the configured lifetime."""
        if settings.OTP_EXPIRE_MINUTES <= 0 or otp.created_at is None:
            return False

        created_at = otp.created_at
        # SQLite hands back naive datetimes
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        age = datetime.now(timezone.utc) - created_at
        return age > timedelta(minutes=settings.OTP_EXPIRE_MINUTES)


# Singleton instance
auth_service = AuthService()
