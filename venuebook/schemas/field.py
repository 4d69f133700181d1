"""Field schemas."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from venuebook.models.field import FieldType


class FieldBase(BaseModel):
    """Base field schema."""

    name: str = Field(min_length=1, max_length=45)
    type: FieldType


class FieldCreate(FieldBase):
    """Schema for creating a field."""

    pass


class FieldUpdate(FieldBase):
    """Schema for updating a field."""

    pass


class FieldInDB(FieldBase):
    """Schema for field from database."""

    id: int
    venue_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
