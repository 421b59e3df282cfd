"""Tests for the Postgres room and booking repositories.

All tests use mocked cursors and do not require a live Postgres instance.
"""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock, patch

from hotelbooking.domain.models import Booking, Room
from hotelbooking.infra.repositories.bookings_repository import PgBookingRepository
from hotelbooking.infra.repositories.rooms_repository import PgRoomRepository

_ROOMS_TXN = "hotelbooking.infra.repositories.rooms_repository.txn"
_BOOKINGS_TXN = "hotelbooking.infra.repositories.bookings_repository.txn"


class TestPgRoomRepository:
    def test_get_all_maps_rows(self):
        mock_cursor = MagicMock()
        mock_cursor.fetchall.return_value = [(1, "A"), (2, "B")]

        with patch(_ROOMS_TXN) as mock_txn:
            mock_txn.return_value.__enter__.return_value = mock_cursor
            rooms = PgRoomRepository().get_all()

        assert rooms == [Room(id=1, description="A"), Room(id=2, description="B")]
        mock_txn.assert_called_once_with()
        sql = mock_cursor.execute.call_args.args[0]
        assert "FROM rooms" in sql
        assert "ORDER BY id" in sql

    def test_add_writes_back_generated_id(self):
        mock_cursor = MagicMock()
        mock_cursor.fetchone.return_value = (17,)
        room = Room(description="Sea view")

        with patch(_ROOMS_TXN) as mock_txn:
            mock_txn.return_value.__enter__.return_value = mock_cursor
            PgRoomRepository().add(room)

        assert room.id == 17
        sql, params = mock_cursor.execute.call_args.args
        assert "INSERT INTO rooms" in sql
        assert params == ("Sea view",)


class TestPgBookingRepository:
    def test_get_all_maps_rows(self):
        mock_cursor = MagicMock()
        mock_cursor.fetchall.return_value = [
            (1, 2, None, date(2025, 6, 1), date(2025, 6, 3), True),
            (2, 1, 8, date(2025, 6, 4), date(2025, 6, 4), False),
        ]

        with patch(_BOOKINGS_TXN) as mock_txn:
            mock_txn.return_value.__enter__.return_value = mock_cursor
            bookings = PgBookingRepository().get_all()

        assert bookings == [
            Booking(id=1, room_id=2, customer_id=None, start_date=date(2025, 6, 1),
                    end_date=date(2025, 6, 3), is_active=True),
            Booking(id=2, room_id=1, customer_id=8, start_date=date(2025, 6, 4),
                    end_date=date(2025, 6, 4), is_active=False),
        ]
        mock_cursor.execute.assert_called_once()

    def test_add_inserts_once_and_sets_id(self):
        mock_cursor = MagicMock()
        mock_cursor.fetchone.return_value = (55,)
        booking = Booking(
            start_date=date(2025, 6, 1),
            end_date=date(2025, 6, 3),
            room_id=2,
            is_active=True,
            customer_id=9,
        )

        with patch(_BOOKINGS_TXN) as mock_txn:
            mock_txn.return_value.__enter__.return_value = mock_cursor
            PgBookingRepository().add(booking)

        assert booking.id == 55
        mock_cursor.execute.assert_called_once()
        sql, params = mock_cursor.execute.call_args.args
        assert "INSERT INTO bookings" in sql
        assert "RETURNING id" in sql
        assert params == (2, 9, date(2025, 6, 1), date(2025, 6, 3), True)
