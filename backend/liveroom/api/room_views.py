"""Room view builders used by REST responses."""

from __future__ import annotations

from liveroom.rooms.registry import RoomDetail


def room_detail(room: RoomDetail) -> dict[str, object]:
    return {
        "roomId": room.room_id,
        "mcuUrl": room.mcu_url,
        "roomName": room.name,
        "pubUserId": room.publisher_user_id,
        "date": room.created_at_millis,
    }
