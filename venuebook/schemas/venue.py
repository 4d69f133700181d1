"""Venue schemas."""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime

from venuebook.schemas.field import FieldInDB


class VenueBase(BaseModel):
    """Base venue schema."""

    name: str = Field(min_length=1, max_length=45)
    phone: str = Field(min_length=1, max_length=45)
    address: str = Field(min_length=1, max_length=45)


class VenueCreate(VenueBase):
    """Schema for creating a venue."""

    pass


class VenueUpdate(VenueBase):
    """Schema for updating a venue. Every attribute is overwritten."""

    pass


class VenueInDB(VenueBase):
    """Schema for venue from database."""

    id: int
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class VenueWithFields(VenueInDB):
    """Venue together with its fields."""

    fields: List[FieldInDB] = []
