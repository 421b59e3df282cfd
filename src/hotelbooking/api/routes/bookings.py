"""Bookings endpoints.

GET    /bookings                                   → list
GET    /bookings/available-room?start_date&end_date → {"room_id": id | -1}
POST   /bookings                                   → create (201) or 409 no_room_available

Dates are inclusive YYYY-MM-DD values. Invalid ranges map to 400.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict

from hotelbooking.api.dependencies import get_booking_manager, get_booking_repository
from hotelbooking.domain.booking_manager import BookingManager, InvalidDateRangeError
from hotelbooking.domain.models import Booking
from hotelbooking.domain.repository import Repository

router = APIRouter(prefix="/bookings", tags=["bookings"])


class CreateBookingRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    start_date: date
    end_date: date
    customer_id: int | None = None


def booking_to_dict(booking: Booking) -> dict:
    return {
        "id": booking.id,
        "room_id": booking.room_id,
        "customer_id": booking.customer_id,
        "start_date": booking.start_date.isoformat(),
        "end_date": booking.end_date.isoformat(),
        "is_active": booking.is_active,
    }


@router.get("")
def list_bookings(
    bookings: Repository[Booking] = Depends(get_booking_repository),
) -> list[dict]:
    return [booking_to_dict(b) for b in bookings.get_all()]


@router.get("/available-room")
def get_available_room(
    start_date: date = Query(..., description="First night (YYYY-MM-DD, inclusive)"),
    end_date: date = Query(..., description="Last night (YYYY-MM-DD, inclusive)"),
    manager: BookingManager = Depends(get_booking_manager),
) -> dict:
    """Return a free room id for the range, or -1 when none is free."""
    try:
        room_id = manager.find_available_room(start_date, end_date)
    except InvalidDateRangeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"room_id": room_id}


@router.post("", status_code=201)
def create_booking(
    body: CreateBookingRequest,
    manager: BookingManager = Depends(get_booking_manager),
) -> dict:
    """Book the first free room for the requested range.

    Returns 409 when every room is taken.
    """
    booking = Booking(
        start_date=body.start_date,
        end_date=body.end_date,
        customer_id=body.customer_id,
    )
    try:
        created = manager.create_booking(booking)
    except InvalidDateRangeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if not created:
        raise HTTPException(status_code=409, detail="no_room_available")
    return booking_to_dict(booking)
