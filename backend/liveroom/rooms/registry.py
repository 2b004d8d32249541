"""In-memory registry of published live rooms."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
import threading
import time

logger = logging.getLogger(__name__)


def now_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class RoomDetail:
    """One published room. Replaced as a whole value, never mutated."""

    room_id: str
    mcu_url: str
    name: str
    publisher_user_id: str
    created_at_millis: int = 0


class RoomRegistry:
    """Thread-safe table of published rooms keyed by room id."""

    def __init__(self, clock: Callable[[], int] = now_millis) -> None:
        self._rooms: dict[str, RoomDetail] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)

    def __contains__(self, room_id: object) -> bool:
        with self._lock:
            return room_id in self._rooms

    def publish(
        self,
        *,
        room_id: str,
        mcu_url: str,
        name: str,
        publisher_user_id: str,
    ) -> RoomDetail:
        """Insert or replace a room, stamping its creation time."""
        fields = {
            "room_id": room_id,
            "mcu_url": mcu_url,
            "name": name,
            "publisher_user_id": publisher_user_id,
        }
        missing = [key for key, value in fields.items() if not value]
        if missing:
            raise ValueError(f"missing required room fields: {', '.join(missing)}")

        with self._lock:
            room = RoomDetail(**fields, created_at_millis=self._clock())
            replaced = room_id in self._rooms
            self._rooms[room_id] = room

        logger.info(
            "%s room %s by user %s",
            "republished" if replaced else "published",
            room_id,
            publisher_user_id,
        )
        return room

    def unpublish(self, room_id: str) -> None:
        """Remove a room. Unknown ids are ignored."""
        if not room_id:
            raise ValueError("room_id must not be empty")

        with self._lock:
            removed = self._rooms.pop(room_id, None)
        if removed is not None:
            logger.info("unpublished room %s", room_id)

    def query_one(self, room_id: str) -> RoomDetail | None:
        with self._lock:
            return self._rooms.get(room_id)

    def query_all(self) -> list[RoomDetail]:
        """Return all rooms, most recently published first."""
        with self._lock:
            rooms = list(self._rooms.values())
        rooms.sort(key=lambda room: room.created_at_millis, reverse=True)
        return rooms

    def query(self, room_id: str = "") -> list[RoomDetail]:
        """List every room when room_id is empty, otherwise look up one room."""
        if not room_id:
            return self.query_all()
        room = self.query_one(room_id)
        return [] if room is None else [room]


__all__ = [
    "RoomDetail",
    "RoomRegistry",
    "now_millis",
]
