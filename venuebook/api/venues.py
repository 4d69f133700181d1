"""Venue endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from venuebook.core.database import get_db
from venuebook.core.dependencies import require_owner
from venuebook.models.user import User
from venuebook.models.venue import Venue
from venuebook.schemas.common import DataResponse, MessageResponse
from venuebook.schemas.venue import VenueCreate, VenueInDB, VenueUpdate, VenueWithFields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/venues", tags=["venues"])


async def get_owned_venue(db: AsyncSession, venue_id: int, user: User) -> Venue:
    """
    Load a venue and check that the user owns it.

    Raises:
        HTTPException: 404 if missing, 403 if owned by someone else
    """
    result = await db.execute(select(Venue).where(Venue.id == venue_id))
    venue = result.scalar_one_or_none()

    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")

    if venue.user_id is not None and venue.user_id != user.id:
        raise HTTPException(status_code=403, detail="You are not the owner of this venue")

    return venue


@router.get("", response_model=DataResponse[List[VenueWithFields]])
async def list_venues(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_owner),
):
    """
    List all venues with their fields.

    Args:
        db: Database session
        user: Authenticated owner

    Returns:
        List of venues
    """
    result = await db.execute(
        select(Venue).options(selectinload(Venue.fields)).order_by(Venue.id)
    )
    venues = result.scalars().all()
    return {"message": "Success get venues", "data": venues}


@router.post("", response_model=DataResponse[VenueInDB], status_code=201)
async def create_venue(
    venue: VenueCreate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_owner),
):
    """
    Create a new venue owned by the authenticated owner.

    Args:
        venue: Venue data
        db: Database session
        user: Authenticated owner

    Returns:
        Created venue
    """
    db_venue = Venue(**venue.model_dump(), user_id=user.id)
    db.add(db_venue)
    await db.commit()
    await db.refresh(db_venue)

    logger.info(f"Owner {user.id} created venue {db_venue.id}")
    return {"message": "New venue is created!", "data": db_venue}


@router.get("/{venue_id}", response_model=DataResponse[VenueWithFields])
async def get_venue(
    venue_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_owner),
):
    """
    Get a specific venue by ID with its fields.

    Args:
        venue_id: Venue ID
        db: Database session
        user: Authenticated owner

    Returns:
        Venue details
    """
    result = await db.execute(
        select(Venue).options(selectinload(Venue.fields)).where(Venue.id == venue_id)
    )
    venue = result.scalar_one_or_none()

    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")

    return {"message": "Success get venue with id", "data": venue}


@router.put("/{venue_id}", response_model=DataResponse[VenueInDB])
async def update_venue(
    venue_id: int,
    venue_update: VenueUpdate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_owner),
):
    """
    Replace a venue's name, phone and address.

    Args:
        venue_id: Venue ID
        venue_update: New values for every attribute
        db: Database session
        user: Authenticated owner

    Returns:
        Updated venue
    """
    venue = await get_owned_venue(db, venue_id, user)

    for field, value in venue_update.model_dump().items():
        setattr(venue, field, value)

    await db.commit()
    await db.refresh(venue)

    logger.info(f"Owner {user.id} updated venue {venue.id}")
    return {"message": "Venue has been updated!", "data": venue}


@router.delete("/{venue_id}", response_model=MessageResponse)
async def delete_venue(
    venue_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_owner),
):
    """
    Delete a venue together with its fields and their bookings.

    Args:
        venue_id: Venue ID
        db: Database session
        user: Authenticated owner
    """
    venue = await get_owned_venue(db, venue_id, user)

    await db.delete(venue)
    await db.commit()

    logger.info(f"Owner {user.id} deleted venue {venue_id}")
    return {"message": "Venue has been deleted!"}
