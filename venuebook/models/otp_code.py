"""OTP code model."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from venuebook.core.database import Base


class OtpCode(Base):
    """A numeric code emailed to a user to verify their address."""

    __tablename__ = "otp_codes"

    id = Column(Integer, primary_key=True, index=True)
    otp_code = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="otp_codes")
