"""Booking endpoints."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from venuebook.core.database import get_db
from venuebook.core.dependencies import require_player
from venuebook.models.user import User
from venuebook.schemas.booking import BookingCreate, BookingDetail, BookingInDB, BookingSummary
from venuebook.schemas.common import DataResponse, MessageResponse
from venuebook.services.booking_service import (
    BookingConflict,
    MembershipError,
    NotFound,
    booking_service,
)

router = APIRouter(tags=["bookings"])


@router.post(
    "/venues/{venue_id}/bookings",
    response_model=DataResponse[BookingInDB],
    status_code=201,
)
async def create_booking(
    venue_id: int,
    data: BookingCreate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_player),
):
    """
    Book a field of a venue.

    The field must belong to the venue in the path. The booker is added as
    the first player of the booking.

    Args:
        venue_id: Venue ID
        data: Field ID and play time range
        db: Database session
        user: Authenticated player

    Returns:
        Created booking
    """
    try:
        booking = await booking_service.create_booking(db, venue_id, user, data)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BookingConflict as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"message": "Booking created", "data": booking}


@router.get("/bookings", response_model=DataResponse[List[BookingSummary]])
async def list_bookings(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_player),
):
    """List all bookings with their number of players."""
    bookings = await booking_service.list_bookings(db)
    return {"message": "Success get bookings", "data": bookings}


@router.get("/bookings/{booking_id}", response_model=DataResponse[BookingDetail])
async def get_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_player),
):
    """
    Get a booking with its field and players.

    Args:
        booking_id: Booking ID
        db: Database session
        user: Authenticated player

    Returns:
        Booking details
    """
    try:
        booking = await booking_service.get_booking(db, booking_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {"message": "Success get booking with id", "data": booking}


@router.put("/bookings/{booking_id}/join", response_model=MessageResponse)
async def join_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_player),
):
    """Join a booking as a player."""
    try:
        await booking_service.join(db, booking_id, user)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except MembershipError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"message": "Successfully joined booking"}


@router.put("/bookings/{booking_id}/unjoin", response_model=MessageResponse)
async def unjoin_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_player),
):
    """Leave a booking."""
    try:
        await booking_service.unjoin(db, booking_id, user)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except MembershipError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"message": "Successfully left booking"}


@router.get("/schedule", response_model=DataResponse[List[BookingSummary]])
async def get_schedule(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_player),
):
    """List the bookings the authenticated player has joined."""
    bookings = await booking_service.get_schedule(db, user)
    return {"message": "Success get schedule", "data": bookings}
