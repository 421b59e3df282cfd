"""Tests for app factory wiring and middleware."""

from datetime import timedelta
from unittest.mock import patch

from fastapi.testclient import TestClient

from hotelbooking.api.factory import create_app
from hotelbooking.domain.booking_manager import BookingManager
from hotelbooking.infra.repositories.bookings_repository import PgBookingRepository
from hotelbooking.infra.repositories.memory import InMemoryRepository
from hotelbooking.infra.repositories.rooms_repository import PgRoomRepository
from hotelbooking.infra.settings import Settings


class TestHealth:
    def test_health_available(self):
        client = TestClient(create_app(Settings()))
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestStorageBackend:
    def test_memory_backend(self):
        app = create_app(Settings(storage_backend="memory"))
        assert isinstance(app.state.room_repository, InMemoryRepository)
        assert isinstance(app.state.booking_repository, InMemoryRepository)
        assert isinstance(app.state.booking_manager, BookingManager)

    def test_postgres_backend_does_not_connect_at_startup(self):
        with patch("hotelbooking.infra.db.psycopg2.connect") as mock_connect:
            app = create_app(Settings(storage_backend="postgres"))
        assert isinstance(app.state.room_repository, PgRoomRepository)
        assert isinstance(app.state.booking_repository, PgBookingRepository)
        mock_connect.assert_not_called()

    def test_reads_environment_when_no_settings(self, monkeypatch):
        monkeypatch.setenv("STORAGE_BACKEND", "postgres")
        app = create_app()
        assert isinstance(app.state.room_repository, PgRoomRepository)

    def test_injected_repositories_win(self):
        rooms, bookings = InMemoryRepository(), InMemoryRepository()
        app = create_app(
            Settings(storage_backend="postgres"),
            room_repository=rooms,
            booking_repository=bookings,
        )
        assert app.state.room_repository is rooms
        assert app.state.booking_repository is bookings


class TestDemoSeed:
    def test_seed_demo_data_populates_memory_store(self, clock, today):
        client = TestClient(create_app(Settings(seed_demo_data=True), clock=clock))

        rooms = client.get("/rooms").json()
        assert [r["description"] for r in rooms] == ["A", "B", "C"]

        response = client.get(
            "/occupancy/fully-occupied",
            params={
                "start_date": today.isoformat(),
                "end_date": (today + timedelta(days=30)).isoformat(),
            },
        )
        dates = response.json()["dates"]
        assert len(dates) == 11
        assert dates[0] == (today + timedelta(days=10)).isoformat()

    def test_seed_skipped_for_postgres(self):
        with patch("hotelbooking.api.factory.seed_demo_data") as mock_seed:
            create_app(Settings(storage_backend="postgres", seed_demo_data=True))
        mock_seed.assert_not_called()


class TestCorrelationId:
    def test_generates_correlation_id(self):
        client = TestClient(create_app(Settings()))
        response = client.get("/health")
        assert response.headers.get("X-Correlation-ID")

    def test_echoes_incoming_correlation_id(self):
        client = TestClient(create_app(Settings()))
        response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
        assert response.headers["X-Correlation-ID"] == "abc-123"
