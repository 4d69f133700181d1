"""Field endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from venuebook.api.venues import get_owned_venue
from venuebook.core.database import get_db
from venuebook.core.dependencies import require_owner
from venuebook.models.field import Field
from venuebook.models.user import User
from venuebook.schemas.common import DataResponse, MessageResponse
from venuebook.schemas.field import FieldCreate, FieldInDB, FieldUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/venues/{venue_id}/fields", tags=["fields"])


async def get_venue_field(db: AsyncSession, venue_id: int, field_id: int) -> Field:
    """Load a field that belongs to the given venue, or raise 404."""
    result = await db.execute(
        select(Field).where(and_(Field.id == field_id, Field.venue_id == venue_id))
    )
    field = result.scalar_one_or_none()

    if not field:
        raise HTTPException(status_code=404, detail="Field not found in this venue")

    return field


@router.get("", response_model=DataResponse[List[FieldInDB]])
async def list_fields(
    venue_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_owner),
):
    """
    List the fields of a venue.

    Args:
        venue_id: Venue ID
        db: Database session
        user: Authenticated owner

    Returns:
        Fields whose venue_id matches
    """
    result = await db.execute(
        select(Field).where(Field.venue_id == venue_id).order_by(Field.id)
    )
    fields = result.scalars().all()
    return {"message": "Fields have been loaded!", "data": fields}


@router.post("", response_model=DataResponse[FieldInDB], status_code=201)
async def create_field(
    venue_id: int,
    field: FieldCreate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_owner),
):
    """
    Add a field to a venue.

    Args:
        venue_id: Venue ID
        field: Field name and type
        db: Database session
        user: Authenticated owner

    Returns:
        Created field
    """
    venue = await get_owned_venue(db, venue_id, user)

    db_field = Field(**field.model_dump(), venue_id=venue.id)
    db.add(db_field)
    await db.commit()
    await db.refresh(db_field)

    logger.info(f"Owner {user.id} created field {db_field.id} in venue {venue.id}")
    return {"message": "New field is created!", "data": db_field}


@router.get("/{field_id}", response_model=DataResponse[FieldInDB])
async def get_field(
    venue_id: int,
    field_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_owner),
):
    """Get a field of a venue."""
    field = await get_venue_field(db, venue_id, field_id)
    return {"message": "Field has been loaded!", "data": field}


@router.put("/{field_id}", response_model=DataResponse[FieldInDB])
async def update_field(
    venue_id: int,
    field_id: int,
    field_update: FieldUpdate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_owner),
):
    """
    Replace a field's name and type.

    Args:
        venue_id: Venue ID
        field_id: Field ID
        field_update: New name and type
        db: Database session
        user: Authenticated owner

    Returns:
        Updated field
    """
    await get_owned_venue(db, venue_id, user)
    field = await get_venue_field(db, venue_id, field_id)

    for name, value in field_update.model_dump().items():
        setattr(field, name, value)

    await db.commit()
    await db.refresh(field)

    logger.info(f"Owner {user.id} updated field {field.id}")
    return {"message": "Field has been updated!", "data": field}


@router.delete("/{field_id}", response_model=MessageResponse)
async def delete_field(
    venue_id: int,
    field_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_owner),
):
    """Delete a field and its bookings."""
    await get_owned_venue(db, venue_id, user)
    field = await get_venue_field(db, venue_id, field_id)

    await db.delete(field)
    await db.commit()

    logger.info(f"Owner {user.id} deleted field {field_id}")
    return {"message": "Field has been deleted!"}
