"""Shared pytest fixtures for hotel booking tests."""
import sys
sys.dont_write_bytecode = True

from datetime import date  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from hotelbooking.domain.booking_manager import BookingManager  # noqa: E402
from hotelbooking.domain.models import Room  # noqa: E402
from hotelbooking.infra.repositories.memory import InMemoryRepository  # noqa: E402

TODAY = date(2026, 3, 2)


@pytest.fixture
def today() -> date:
    """Pinned "today" used by every fixed clock."""
    return TODAY


@pytest.fixture
def clock(today):
    return lambda: today


@pytest.fixture
def mock_room_repository():
    """Room store double; tests set get_all.return_value."""
    repo = MagicMock(spec=InMemoryRepository)
    repo.get_all.return_value = []
    return repo


@pytest.fixture
def mock_booking_repository():
    """Booking store double; tests set get_all.return_value and inspect add."""
    repo = MagicMock(spec=InMemoryRepository)
    repo.get_all.return_value = []
    return repo


@pytest.fixture
def booking_manager(mock_booking_repository, mock_room_repository, clock):
    return BookingManager(mock_booking_repository, mock_room_repository, clock=clock)


@pytest.fixture
def two_rooms(mock_room_repository):
    rooms = [Room(id=1), Room(id=2)]
    mock_room_repository.get_all.return_value = rooms
    return rooms
