"""Room REST routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends

from liveroom.api.deps import get_room_registry
from liveroom.api.errors import raise_param_error
from liveroom.api.http import api_ok
from liveroom.api.room_views import room_detail
from liveroom.rooms.models import PublishRequest
from liveroom.rooms.models import QueryRequest
from liveroom.rooms.models import UnpublishRequest
from liveroom.rooms.registry import RoomRegistry

router = APIRouter()


@router.post("/publish")
def publish(
    payload: PublishRequest,
    registry: RoomRegistry = Depends(get_room_registry),
) -> dict[str, object]:
    """Register a room or replace the one with the same id."""
    try:
        registry.publish(
            room_id=payload.room_id,
            mcu_url=payload.mcu_url,
            name=payload.name,
            publisher_user_id=payload.publisher_user_id,
        )
    except ValueError as exc:
        raise_param_error(str(exc))
    return api_ok()


@router.post("/unpublish")
def unpublish(
    payload: UnpublishRequest,
    registry: RoomRegistry = Depends(get_room_registry),
) -> dict[str, object]:
    """Remove a room; unknown ids succeed."""
    try:
        registry.unpublish(payload.room_id)
    except ValueError as exc:
        raise_param_error(str(exc))
    return api_ok()


@router.post("/query")
def query(
    payload: QueryRequest,
    registry: RoomRegistry = Depends(get_room_registry),
) -> dict[str, object]:
    """List rooms newest first, or the single room matching roomId."""
    rooms = registry.query(payload.room_id or "")
    return api_ok(roomList=[room_detail(room) for room in rooms])
