"""Authentication schemas."""
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from venuebook.models.user import UserRole


class RegisterRequest(BaseModel):
    """Schema for registering a new account."""

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=6)
    role: UserRole = UserRole.USER

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt only hashes the first 72 bytes
        if len(value.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes")
        return value


class LoginRequest(BaseModel):
    """Schema for logging in.

    Both fields are optional here so that missing values are reported
    by the login route itself as a login error.
    """

    email: Optional[str] = None
    password: Optional[str] = None


class OtpConfirmationRequest(BaseModel):
    """Schema for confirming an emailed OTP code."""

    email: EmailStr
    otp_code: int


class TokenData(BaseModel):
    """Bearer token issued on login."""

    type: str = "bearer"
    token: str
    expires_at: datetime


class UserInDB(BaseModel):
    """Public view of a user."""

    id: int
    name: str
    email: str
    role: UserRole
    is_verified: bool

    model_config = ConfigDict(from_attributes=True)
