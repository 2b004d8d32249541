"""Process-wide runtime state handed to request handlers via api.deps."""

from __future__ import annotations

from liveroom.core.config import Settings
from liveroom.core.config import load_settings
from liveroom.core.logging import setup_logging
from liveroom.im.issuer import RongCloudTokenIssuer
from liveroom.im.issuer import TokenIssuer
from liveroom.rooms.registry import RoomRegistry

settings = load_settings()
room_registry = RoomRegistry()
token_issuer: TokenIssuer = RongCloudTokenIssuer.from_settings(settings)


def startup() -> None:
    """Reload settings and reset the in-memory registry and IM client."""
    global settings, room_registry, token_issuer
    shutdown()
    settings = load_settings()
    setup_logging(settings.liveroom_log_level)
    room_registry = RoomRegistry()
    token_issuer = RongCloudTokenIssuer.from_settings(settings)


def shutdown() -> None:
    """Release the outbound HTTP client, if the issuer owns one."""
    close = getattr(token_issuer, "close", None)
    if callable(close):
        close()


__all__ = [
    "Settings",
    "room_registry",
    "settings",
    "shutdown",
    "startup",
    "token_issuer",
]
