"""Occupancy endpoint.

GET /occupancy/fully-occupied?start_date&end_date → dates on which every room is booked
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from hotelbooking.api.dependencies import get_booking_manager
from hotelbooking.domain.booking_manager import BookingManager, InvalidDateRangeError

router = APIRouter(prefix="/occupancy", tags=["occupancy"])


@router.get("/fully-occupied")
def get_fully_occupied_dates(
    start_date: date = Query(..., description="Start date (YYYY-MM-DD, inclusive)"),
    end_date: date = Query(..., description="End date (YYYY-MM-DD, inclusive)"),
    manager: BookingManager = Depends(get_booking_manager),
) -> dict:
    """List the dates in the range on which no room is free.

    Past ranges are allowed.
    """
    try:
        dates = manager.get_fully_occupied_dates(start_date, end_date)
    except InvalidDateRangeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"dates": [d.isoformat() for d in dates]}
