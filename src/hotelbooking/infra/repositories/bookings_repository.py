"""Bookings repository - Postgres adapter for the Booking store.

Uses raw SQL with psycopg2 (no ORM). Each call runs in its own short
transaction. No row locking: two concurrent writers can both take the
last free room.
"""

from __future__ import annotations

from hotelbooking.domain.models import Booking
from hotelbooking.infra.db import fetchall, fetchone, txn

_COLUMNS = "id, room_id, customer_id, start_date, end_date, is_active"


def _row_to_booking(row: tuple) -> Booking:
    return Booking(
        id=row[0],
        room_id=row[1],
        customer_id=row[2],
        start_date=row[3],
        end_date=row[4],
        is_active=row[5],
    )


class PgBookingRepository:
    def get_all(self) -> list[Booking]:
        """Return all bookings (active and inactive) ordered by id."""
        with txn() as cur:
            rows = fetchall(cur, f"SELECT {_COLUMNS} FROM bookings ORDER BY id")
        return [_row_to_booking(row) for row in rows]

    def add(self, booking: Booking) -> None:
        """Insert *booking* and write the generated id back onto it."""
        with txn() as cur:
            row = fetchone(
                cur,
                """
                INSERT INTO bookings (room_id, customer_id, start_date, end_date, is_active)
                VALUES (%s, %s, %s, %s, %s)
                RETURNING id
                """,
                (
                    booking.room_id,
                    booking.customer_id,
                    booking.start_date,
                    booking.end_date,
                    booking.is_active,
                ),
            )
        booking.id = row[0]
