"""Rooms endpoint.

GET    /rooms   → list
POST   /rooms   → create (201)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict

from hotelbooking.api.dependencies import get_room_repository
from hotelbooking.domain.models import Room
from hotelbooking.domain.repository import Repository
from hotelbooking.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/rooms", tags=["rooms"])


class CreateRoomRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    description: str = ""


def _room_to_dict(room: Room) -> dict:
    return {"id": room.id, "description": room.description}


@router.get("")
def list_rooms(
    rooms: Repository[Room] = Depends(get_room_repository),
) -> list[dict]:
    """List all rooms in repository order."""
    return [_room_to_dict(room) for room in rooms.get_all()]


@router.post("", status_code=201)
def create_room(
    body: CreateRoomRequest,
    rooms: Repository[Room] = Depends(get_room_repository),
) -> dict:
    room = Room(description=body.description)
    rooms.add(room)
    logger.info("room created", extra={"extra_fields": {"room_id": room.id}})
    return _room_to_dict(room)
