"""Booking model."""
from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from venuebook.core.database import Base


class Booking(Base):
    """Represents a reservation of a field for a time range."""

    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    play_date_start = Column(DateTime, nullable=False)
    play_date_end = Column(DateTime, nullable=False)
    field_id = Column(Integer, ForeignKey("fields.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id_booking = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    field = relationship("Field", back_populates="bookings")
    user = relationship("User", back_populates="bookings")
    user_has_bookings = relationship("UserHasBooking", back_populates="booking", cascade="all, delete-orphan")

    # Overlap lookups filter by field and time range
    __table_args__ = (
        Index("ix_bookings_field_start_end", "field_id", "play_date_start", "play_date_end"),
    )
