"""FastAPI dependencies resolving the objects wired by create_app."""

from fastapi import Request

from hotelbooking.domain.booking_manager import BookingManager
from hotelbooking.domain.models import Booking, Room
from hotelbooking.domain.repository import Repository


def get_booking_manager(request: Request) -> BookingManager:
    return request.app.state.booking_manager


def get_room_repository(request: Request) -> Repository[Room]:
    return request.app.state.room_repository


def get_booking_repository(request: Request) -> Repository[Booking]:
    return request.app.state.booking_repository
