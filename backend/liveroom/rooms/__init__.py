"""Room domain package."""

from liveroom.rooms.models import PublishRequest
from liveroom.rooms.models import QueryRequest
from liveroom.rooms.models import UnpublishRequest
from liveroom.rooms.registry import RoomDetail
from liveroom.rooms.registry import RoomRegistry
from liveroom.rooms.registry import now_millis

__all__ = [
    "PublishRequest",
    "QueryRequest",
    "RoomDetail",
    "RoomRegistry",
    "UnpublishRequest",
    "now_millis",
]
