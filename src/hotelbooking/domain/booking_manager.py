"""Booking manager - room availability and occupancy engine.

Every operation works on one snapshot: a single get_all() per repository,
then pure in-memory computation. create_booking adds at most one write.

Date semantics: ranges are inclusive calendar dates; time of day is ignored.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from hotelbooking.domain.models import Booking, Room
from hotelbooking.domain.repository import Repository
from hotelbooking.domain.room_conflict import occupied_room_ids
from hotelbooking.infra.time import Clock, today
from hotelbooking.observability.logging import get_logger

logger = get_logger(__name__)

NO_ROOM_AVAILABLE = -1

# Both operations reject an inverted range, with different wording.
# find_available_room also rejects past start dates, hence the longer text.
AVAILABILITY_RANGE_MESSAGE = "The start date cannot be in the past or later than the end date."
OCCUPANCY_RANGE_MESSAGE = "The start date cannot be later than the end date."


class InvalidDateRangeError(ValueError):
    """Raised when a requested date range is rejected before any lookup."""


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


class BookingManager:
    """Finds free rooms, creates bookings and reports full occupancy.

    Args:
        booking_repository: Store of Booking records (get_all/add).
        room_repository: Store of Room records (get_all).
        clock: Returns the current date; only find_available_room uses it.
    """

    def __init__(
        self,
        booking_repository: Repository[Booking],
        room_repository: Repository[Room],
        clock: Clock = today,
    ) -> None:
        self._bookings = booking_repository
        self._rooms = room_repository
        self._clock = clock

    def find_available_room(self, start_date: date, end_date: date) -> int:
        """Return the id of a room free for [start_date, end_date].

        Rooms are tried in repository order; the first free one wins.

        Returns:
            Room id, or NO_ROOM_AVAILABLE (-1) when every room is taken.

        Raises:
            InvalidDateRangeError: start_date is before today or after end_date.
        """
        start_date = _as_date(start_date)
        end_date = _as_date(end_date)
        if start_date < self._clock() or start_date > end_date:
            raise InvalidDateRangeError(AVAILABILITY_RANGE_MESSAGE)

        rooms = self._rooms.get_all()
        taken = occupied_room_ids(self._bookings.get_all(), start_date, end_date)

        room_id = next((r.id for r in rooms if r.id not in taken), NO_ROOM_AVAILABLE)
        logger.info(
            "room availability checked",
            extra={
                "extra_fields": {
                    "start_date": start_date.isoformat(),
                    "end_date": end_date.isoformat(),
                    "rooms_total": len(rooms),
                    "rooms_taken": len(taken),
                    "room_id": room_id,
                },
            },
        )
        return room_id

    def create_booking(self, booking: Booking) -> bool:
        """Assign *booking* to a free room and persist it.

        On success the candidate is mutated in place (room_id set,
        is_active=True) and added to the booking repository exactly once.
        Nothing is written when no room is free.

        Returns:
            True if the booking was stored, False otherwise.

        Raises:
            InvalidDateRangeError: propagated from find_available_room.
        """
        room_id = self.find_available_room(booking.start_date, booking.end_date)
        if room_id == NO_ROOM_AVAILABLE:
            logger.info(
                "booking rejected: no room available",
                extra={
                    "extra_fields": {
                        "start_date": booking.start_date.isoformat(),
                        "end_date": booking.end_date.isoformat(),
                    },
                },
            )
            return False

        booking.room_id = room_id
        booking.is_active = True
        self._bookings.add(booking)
        logger.info(
            "booking created",
            extra={
                "extra_fields": {
                    "booking_id": booking.id,
                    "room_id": room_id,
                    "start_date": booking.start_date.isoformat(),
                    "end_date": booking.end_date.isoformat(),
                },
            },
        )
        return True

    def get_fully_occupied_dates(self, start_date: date, end_date: date) -> list[date]:
        """List the dates in [start_date, end_date] on which every room is booked.

        Past ranges are allowed. With no rooms the result is always empty.

        Returns:
            Ascending list of dates without duplicates.

        Raises:
            InvalidDateRangeError: start_date is after end_date.
        """
        start_date = _as_date(start_date)
        end_date = _as_date(end_date)
        if start_date > end_date:
            raise InvalidDateRangeError(OCCUPANCY_RANGE_MESSAGE)

        room_ids = {r.id for r in self._rooms.get_all()}
        active = [b for b in self._bookings.get_all() if b.is_active and b.room_id in room_ids]

        fully_occupied: list[date] = []
        if room_ids and active:
            # Index-based so a range ending at date.max never steps past it.
            for offset in range((end_date - start_date).days + 1):
                day = start_date + timedelta(days=offset)
                occupied = {b.room_id for b in active if b.covers(day)}
                if len(occupied) == len(room_ids):
                    fully_occupied.append(day)

        logger.info(
            "occupancy computed",
            extra={
                "extra_fields": {
                    "start_date": start_date.isoformat(),
                    "end_date": end_date.isoformat(),
                    "rooms_total": len(room_ids),
                    "fully_occupied_days": len(fully_occupied),
                },
            },
        )
        return fully_occupied
