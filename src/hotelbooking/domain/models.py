"""Booking domain entities.

Rooms are provisioned outside the booking core; bookings are created by
BookingManager.create_booking and only ever read afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class Room:
    id: int | None = None
    description: str = ""


@dataclass
class Booking:
    """A claim on a room for an inclusive date range.

    Attributes:
        start_date: First occupied night (inclusive).
        end_date: Last occupied night (inclusive).
        room_id: Room the booking occupies. None until a room is assigned.
        is_active: Only active bookings block availability or count as
            occupancy.
        customer_id: Optional reference to the guest, never logged.
        id: Assigned by the repository on add.
    """

    start_date: date
    end_date: date
    room_id: int | None = None
    is_active: bool = False
    customer_id: int | None = None
    id: int | None = None

    def covers(self, day: date) -> bool:
        """Return True if *day* falls inside [start_date, end_date]."""
        return self.start_date <= day <= self.end_date
