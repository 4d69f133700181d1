"""Response envelope schemas."""
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Envelope carrying only a message."""

    message: str


class DataResponse(BaseModel, Generic[T]):
    """Envelope carrying a message and a payload."""

    message: str
    data: T
