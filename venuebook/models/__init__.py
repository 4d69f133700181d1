"""Database models."""
from venuebook.models.user import User, UserRole
from venuebook.models.otp_code import OtpCode
from venuebook.models.venue import Venue
from venuebook.models.field import Field, FieldType
from venuebook.models.booking import Booking
from venuebook.models.user_has_booking import UserHasBooking

__all__ = [
    "User",
    "UserRole",
    "OtpCode",
    "Venue",
    "Field",
    "FieldType",
    "Booking",
    "UserHasBooking",
]
