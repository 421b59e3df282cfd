"""Room conflict detection.

Overlap formula:  (requested_start <= existing_end) AND (existing_start <= requested_end)
Both ranges are inclusive, so a stay that starts on the last night of an
existing booking (or ends on its first night) is a conflict.

Only active bookings generate conflicts.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from hotelbooking.domain.models import Booking


def ranges_overlap(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    """Return True if the inclusive ranges [a_start, a_end] and [b_start, b_end] overlap."""
    return a_start <= b_end and b_start <= a_end


def occupied_room_ids(
    bookings: Iterable[Booking],
    start_date: date,
    end_date: date,
) -> set[int | None]:
    """Collect the rooms holding an active booking that overlaps the range.

    Args:
        bookings: Snapshot of bookings to scan (not modified).
        start_date: Requested first night (inclusive).
        end_date: Requested last night (inclusive).

    Returns:
        Set of room ids that cannot take the requested stay.
    """
    return {
        b.room_id
        for b in bookings
        if b.is_active and ranges_overlap(start_date, end_date, b.start_date, b.end_date)
    }
