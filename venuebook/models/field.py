"""Field model."""
import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from venuebook.core.database import Base


class FieldType(str, enum.Enum):
    """Sports a field can be set up for."""

    SOCCER = "soccer"
    MINISOCCER = "minisoccer"
    FUTSAL = "futsal"
    BASKETBALL = "basketball"
    VOLLEYBALL = "volleyball"


class Field(Base):
    """Represents a bookable field inside a venue."""

    __tablename__ = "fields"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(45), nullable=False)
    type = Column(
        Enum(FieldType, name="field_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    venue_id = Column(Integer, ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    venue = relationship("Venue", back_populates="fields")
    bookings = relationship("Booking", back_populates="field", cascade="all, delete-orphan")
