"""Application settings for backend runtime and tests."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_PORTRAIT_URI = "https://developer.rongcloud.cn/static/images/newversion-logo.png"


class Settings(BaseSettings):
    """Typed settings loaded from environment variables or explicit kwargs."""

    liveroom_app_host: str = "127.0.0.1"
    liveroom_app_port: int = Field(default=8000, ge=1)
    liveroom_app_version: dict[str, Any] = Field(default_factory=dict)

    liveroom_cors_allow_origins: str = "*"
    liveroom_log_level: str = "INFO"

    liveroom_rongcloud_app_key: str = Field(min_length=1)
    liveroom_rongcloud_secret: str = Field(min_length=1)
    liveroom_rongcloud_api_url: str = "https://api-cn.ronghub.com"
    liveroom_rongcloud_timeout_seconds: float = Field(default=5.0, gt=0)
    liveroom_im_portrait_uri: str = DEFAULT_PORTRAIT_URI

    @field_validator("liveroom_log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept only level names known to the logging module."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    def cors_origins(self) -> list[str]:
        return [item.strip() for item in self.liveroom_cors_allow_origins.split(",") if item.strip()]


def load_settings() -> Settings:
    """Load settings from process environment."""
    return Settings()
