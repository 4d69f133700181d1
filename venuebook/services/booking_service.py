"""Booking service for reserving fields and managing players."""
import logging
from datetime import datetime
from typing import List

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from venuebook.models.booking import Booking
from venuebook.models.field import Field
from venuebook.models.user import User
from venuebook.models.user_has_booking import UserHasBooking
from venuebook.schemas.auth import UserInDB
from venuebook.schemas.booking import (
    BookingCreate,
    BookingDetail,
    BookingInDB,
    BookingSummary,
)
from venuebook.schemas.field import FieldInDB

logger = logging.getLogger(__name__)


class BookingError(ValueError):
    """Base class for booking failures."""
    pass


class NotFound(BookingError):
    """Raised when a field or booking does not exist where it was expected."""
    pass


class BookingConflict(BookingError):
    pass


class MembershipError(BookingError):
    """Raised on joining twice or leaving a booking that was never joined."""
    pass


class BookingService:
    """Service for managing bookings."""

    async def create_booking(
        self,
        db: AsyncSession,
        venue_id: int,
        user: User,
        data: BookingCreate,
    ) -> Booking:
        """
        Book a field of a venue for the given user.

        The booking row and the booker's membership row are committed
        together, so either both exist or neither does.

        Args:
            db: Database session
            venue_id: Venue the field must belong to
            user: Authenticated user making the booking
            data: Field and time range

        Returns:
            The created booking

        Raises:
            NotFound: If the field is missing or not part of the venue
            BookingConflict: If the field is already booked in that range
        """
        result = await db.execute(select(Field).where(Field.id == data.field_id))
        field = result.scalar_one_or_none()

        if not field:
            raise NotFound(f"Field with ID {data.field_id} not found")

        if field.venue_id != venue_id:
            raise NotFound(f"Field with ID {data.field_id} is not part of venue {venue_id}")

        if await self._has_overlap(db, field.id, data.play_date_start, data.play_date_end):
            raise BookingConflict(
                f"Field with ID {field.id} is already booked between "
                f"{data.play_date_start} and {data.play_date_end}"
            )

        booking = Booking(
            field_id=field.id,
            user_id_booking=user.id,
            play_date_start=data.play_date_start,
            play_date_end=data.play_date_end,
        )
        booking.user_has_bookings.append(UserHasBooking(user_id=user.id))
        db.add(booking)

        await db.commit()
        await db.refresh(booking)

        logger.info(f"User {user.id} booked field {field.id} (booking {booking.id})")
        return booking

    async def _has_overlap(
        self,
        db: AsyncSession,
        field_id: int,
        start: datetime,
        end: datetime,
    ) -> bool:
        """Check for an existing booking on the field intersecting [start, end)."""
        result = await db.execute(
            select(Booking.id)
            .where(
                and_(
                    Booking.field_id == field_id,
                    Booking.play_date_start < end,
                    Booking.play_date_end > start,
                )
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def list_bookings(self, db: AsyncSession) -> List[BookingSummary]:
        """List every booking with its number of players."""
        result = await db.execute(self._summary_query().order_by(Booking.play_date_start))
        return [self._to_summary(booking, count) for booking, count in result.all()]

    async def get_schedule(self, db: AsyncSession, user: User) -> List[BookingSummary]:
        """List the bookings the user has joined, soonest first."""
        result = await db.execute(
            self._summary_query()
            .join(UserHasBooking, UserHasBooking.booking_id == Booking.id)
            .where(UserHasBooking.user_id == user.id)
            .order_by(Booking.play_date_start)
        )
        return [self._to_summary(booking, count) for booking, count in result.all()]

    async def get_booking(self, db: AsyncSession, booking_id: int) -> BookingDetail:
        """
        Get a booking with its field and players.

        Raises:
            NotFound: If the booking does not exist
        """
        booking = await self._load_booking(db, booking_id)

        return BookingDetail(
            **BookingInDB.model_validate(booking).model_dump(),
            field=FieldInDB.model_validate(booking.field),
            players=[UserInDB.model_validate(m.user) for m in booking.user_has_bookings],
        )

    async def join(self, db: AsyncSession, booking_id: int, user: User) -> Booking:
        """
        Add the user as a player of the booking.

        Raises:
            NotFound: If the booking does not exist
            MembershipError: If the user already joined
        """
        booking = await self._load_booking(db, booking_id)

        if any(m.user_id == user.id for m in booking.user_has_bookings):
            raise MembershipError(f"User already joined booking {booking_id}")

        db.add(UserHasBooking(user_id=user.id, booking_id=booking.id))
        await db.commit()

        logger.info(f"User {user.id} joined booking {booking_id}")
        return booking

    async def unjoin(self, db: AsyncSession, booking_id: int, user: User) -> Booking:
        """
        Remove the user from the players of the booking.

        Raises:
            NotFound: If the booking does not exist
            MembershipError: If the user has not joined
        """
        booking = await self._load_booking(db, booking_id)

        membership = next(
            (m for m in booking.user_has_bookings if m.user_id == user.id), None
        )
        if not membership:
            raise MembershipError(f"User has not joined booking {booking_id}")

        await db.delete(membership)
        await db.commit()

        logger.info(f"User {user.id} left booking {booking_id}")
        return booking

    async def _load_booking(self, db: AsyncSession, booking_id: int) -> Booking:
        """Load a booking with its field and memberships."""
        result = await db.execute(
            select(Booking)
            .where(Booking.id == booking_id)
            .options(
                selectinload(Booking.field),
                selectinload(Booking.user_has_bookings).selectinload(UserHasBooking.user),
            )
        )
        booking = result.scalar_one_or_none()

        if not booking:
            raise NotFound(f"Booking {booking_id} not found")

        return booking

    def _summary_query(self):
        """Select bookings together with their player count."""
        counts = (
            select(
                UserHasBooking.booking_id,
                func.count(UserHasBooking.id).label("players_count"),
            )
            .group_by(UserHasBooking.booking_id)
            .subquery()
        )
        return select(Booking, func.coalesce(counts.c.players_count, 0)).outerjoin(
            counts, counts.c.booking_id == Booking.id
        )

    def _to_summary(self, booking: Booking, players_count: int) -> BookingSummary:
        return BookingSummary(
            **BookingInDB.model_validate(booking).model_dump(),
            players_count=players_count,
        )


# Singleton instance
booking_service = BookingService()
