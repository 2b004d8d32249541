"""Pydantic models for room APIs."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class PublishRequest(BaseModel):
    """POST /publish request body."""

    model_config = ConfigDict(populate_by_name=True)

    room_id: str = Field(alias="roomId", min_length=1)
    mcu_url: str = Field(alias="mcuUrl", min_length=1)
    name: str = Field(alias="roomName", min_length=1)
    publisher_user_id: str = Field(alias="pubUserId", min_length=1)


class UnpublishRequest(BaseModel):
    """POST /unpublish request body."""

    model_config = ConfigDict(populate_by_name=True)

    room_id: str = Field(alias="roomId", min_length=1)


class QueryRequest(BaseModel):
    """POST /query request body; a null or empty roomId lists every room."""

    model_config = ConfigDict(populate_by_name=True)

    room_id: str | None = Field(default=None, alias="roomId")
