"""Dependency providers shared by API routers."""

from __future__ import annotations

import liveroom.runtime as runtime
from liveroom.core.config import Settings
from liveroom.im.issuer import TokenIssuer
from liveroom.rooms.registry import RoomRegistry


def get_settings() -> Settings:
    return runtime.settings


def get_room_registry() -> RoomRegistry:
    return runtime.room_registry


def get_token_issuer() -> TokenIssuer:
    return runtime.token_issuer
