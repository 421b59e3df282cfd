"""FastAPI application factory.

Wires the room and booking repositories selected by STORAGE_BACKEND into
a BookingManager stored on app.state. Tests inject repositories and a
clock directly.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, Response

from hotelbooking.domain.booking_manager import BookingManager
from hotelbooking.domain.models import Booking, Room
from hotelbooking.domain.repository import Repository
from hotelbooking.infra.repositories.bookings_repository import PgBookingRepository
from hotelbooking.infra.repositories.memory import InMemoryRepository
from hotelbooking.infra.repositories.rooms_repository import PgRoomRepository
from hotelbooking.infra.settings import Settings, load_settings
from hotelbooking.infra.time import Clock, today
from hotelbooking.observability.correlation import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from hotelbooking.observability.logging import get_logger
from hotelbooking.operations.seed_demo import seed_demo_data

from .routes import bookings, occupancy, rooms

logger = get_logger(__name__)


def _build_repositories(
    settings: Settings,
) -> tuple[Repository[Room], Repository[Booking]]:
    if settings.storage_backend == "postgres":
        return PgRoomRepository(), PgBookingRepository()
    return InMemoryRepository(), InMemoryRepository()


def create_app(
    settings: Settings | None = None,
    *,
    room_repository: Repository[Room] | None = None,
    booking_repository: Repository[Booking] | None = None,
    clock: Clock | None = None,
) -> FastAPI:
    """Create FastAPI app.

    Args:
        settings: Explicit settings. If None, read from the environment.
        room_repository: Room store override (both overrides or neither).
        booking_repository: Booking store override.
        clock: "Today" provider for availability checks. Defaults to UTC today.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()
    if clock is None:
        clock = today

    if room_repository is None or booking_repository is None:
        room_repository, booking_repository = _build_repositories(settings)
        if settings.seed_demo_data and settings.storage_backend == "memory":
            seed_demo_data(room_repository, booking_repository, clock())

    app = FastAPI(
        title="Hotel Booking",
        docs_url=None,
        redoc_url=None,
    )
    app.state.room_repository = room_repository
    app.state.booking_repository = booking_repository
    app.state.booking_manager = BookingManager(booking_repository, room_repository, clock=clock)

    # Correlation ID middleware
    @app.middleware("http")
    async def correlation_id_middleware(request: Request, call_next) -> Response:
        # Get or generate correlation ID
        cid = request.headers.get(CORRELATION_ID_HEADER) or generate_correlation_id()
        token = set_correlation_id(cid)
        try:
            response = await call_next(request)
            response.headers[CORRELATION_ID_HEADER] = cid
            return response
        finally:
            reset_correlation_id(token)

    @app.get("/health")
    def health() -> dict:
        """Liveness check; reads no repository."""
        return {"status": "ok"}

    app.include_router(rooms.router)
    app.include_router(bookings.router)
    app.include_router(occupancy.router)

    logger.info(
        "app created",
        extra={"extra_fields": {"storage_backend": settings.storage_backend}},
    )
    return app
