"""Static application info routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends

from liveroom.api.deps import get_settings
from liveroom.api.http import api_ok
from liveroom.core.config import Settings

router = APIRouter()


@router.get("/app/version")
def app_version(settings: Settings = Depends(get_settings)) -> dict[str, object]:
    """Return the configured client version map."""
    return api_ok(result=dict(settings.liveroom_app_version))
