"""API schemas."""
from venuebook.schemas.common import MessageResponse, DataResponse
from venuebook.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    OtpConfirmationRequest,
    TokenData,
    UserInDB,
)
from venuebook.schemas.field import FieldCreate, FieldUpdate, FieldInDB
from venuebook.schemas.venue import VenueCreate, VenueUpdate, VenueInDB, VenueWithFields
from venuebook.schemas.booking import (
    BookingCreate,
    BookingInDB,
    BookingSummary,
    BookingDetail,
)

__all__ = [
    "MessageResponse",
    "DataResponse",
    "RegisterRequest",
    "LoginRequest",
    "OtpConfirmationRequest",
    "TokenData",
    "UserInDB",
    "FieldCreate",
    "FieldUpdate",
    "FieldInDB",
    "VenueCreate",
    "VenueUpdate",
    "VenueInDB",
    "VenueWithFields",
    "BookingCreate",
    "BookingInDB",
    "BookingSummary",
    "BookingDetail",
]
