"""User-booking membership model."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from venuebook.core.database import Base


class UserHasBooking(Base):
    """Links a player to a booking they take part in."""

    __tablename__ = "user_has_bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="user_has_bookings")
    booking = relationship("Booking", back_populates="user_has_bookings")

    __table_args__ = (
        UniqueConstraint("user_id", "booking_id", name="uq_user_has_bookings_user_booking"),
    )
