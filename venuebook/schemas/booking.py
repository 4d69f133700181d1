"""Booking schemas."""
from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from typing import List, Optional
from datetime import datetime, timezone

from venuebook.schemas.auth import UserInDB
from venuebook.schemas.field import FieldInDB


class BookingCreate(BaseModel):
    """Schema for booking a field."""

    field_id: int
    play_date_start: datetime
    play_date_end: datetime

    @field_validator("play_date_start", "play_date_end")
    @classmethod
    def to_naive_utc(cls, value: datetime) -> datetime:
        # Stored without timezone, so offsets are folded into UTC
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    @model_validator(mode="after")
    def check_range(self):
        if self.play_date_end <= self.play_date_start:
            raise ValueError("play_date_end must be after play_date_start")
        return self


class BookingInDB(BaseModel):
    """Schema for booking from database."""

    id: int
    field_id: int
    user_id_booking: int
    play_date_start: datetime
    play_date_end: datetime
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BookingSummary(BookingInDB):
    """Booking with the number of players that joined it."""

    players_count: int = 0


class BookingDetail(BookingInDB):
    """Booking with its field and joined players."""

    field: FieldInDB
    players: List[UserInDB] = []
