"""Seed demo rooms and bookings.

seed_demo_data() works on any repository pair (the API uses it on the
in-memory store when SEED_DEMO_DATA is set). Running the module seeds
Postgres via DATABASE_URL:

    python -m hotelbooking.operations.seed_demo
"""

from __future__ import annotations

import sys
from datetime import date, timedelta

from hotelbooking.domain.models import Booking, Room
from hotelbooking.domain.repository import Repository
from hotelbooking.infra.repositories.bookings_repository import PgBookingRepository
from hotelbooking.infra.repositories.rooms_repository import PgRoomRepository
from hotelbooking.infra.time import today as utc_today
from hotelbooking.observability.logging import get_logger

logger = get_logger(__name__)

DEMO_ROOMS = ("A", "B", "C")


def seed_demo_data(
    room_repository: Repository[Room],
    booking_repository: Repository[Booking],
    today: date,
) -> None:
    """Add the demo rooms, then book all of them for days +10 to +20."""
    rooms = [Room(description=description) for description in DEMO_ROOMS]
    for room in rooms:
        room_repository.add(room)

    start = today + timedelta(days=10)
    end = today + timedelta(days=20)
    for customer_id, room in enumerate(rooms, start=1):
        booking_repository.add(
            Booking(
                start_date=start,
                end_date=end,
                room_id=room.id,
                is_active=True,
                customer_id=customer_id,
            )
        )

    logger.info(
        "demo data seeded",
        extra={
            "extra_fields": {
                "rooms": len(rooms),
                "occupied_from": start.isoformat(),
                "occupied_to": end.isoformat(),
            },
        },
    )


def main() -> int:
    seed_demo_data(PgRoomRepository(), PgBookingRepository(), utc_today())
    return 0


if __name__ == "__main__":
    sys.exit(main())
