"""User model."""
import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from venuebook.core.database import Base


class UserRole(str, enum.Enum):
    """Roles a user can register with."""

    OWNER = "owner"
    USER = "user"


class User(Base):
    """Represents a registered account, either a venue owner or a player."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    role = Column(
        Enum(UserRole, name="user_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserRole.USER,
    )
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    otp_codes = relationship("OtpCode", back_populates="user", cascade="all, delete-orphan")
    venues = relationship("Venue", back_populates="owner", cascade="all, delete-orphan")
    bookings = relationship("Booking", back_populates="user", cascade="all, delete-orphan")
    user_has_bookings = relationship("UserHasBooking", back_populates="user", cascade="all, delete-orphan")
