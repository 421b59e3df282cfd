"""Rooms repository - Postgres adapter for the Room store.

Uses raw SQL with psycopg2 (no ORM). Each call runs in its own short
transaction.
"""

from __future__ import annotations

from hotelbooking.domain.models import Room
from hotelbooking.infra.db import fetchall, fetchone, txn


class PgRoomRepository:
    def get_all(self) -> list[Room]:
        """Return all rooms ordered by id."""
        with txn() as cur:
            rows = fetchall(cur, "SELECT id, description FROM rooms ORDER BY id")
        return [Room(id=row[0], description=row[1]) for row in rows]

    def add(self, room: Room) -> None:
        """Insert *room* and write the generated id back onto it."""
        with txn() as cur:
            row = fetchone(
                cur,
                "INSERT INTO rooms (description) VALUES (%s) RETURNING id",
                (room.description,),
            )
        room.id = row[0]
