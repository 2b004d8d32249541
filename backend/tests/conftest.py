"""Shared fixtures for liveroom tests."""

from __future__ import annotations

import os
from typing import Any

import pytest

# liveroom.runtime loads settings at import time.
os.environ.setdefault("LIVEROOM_RONGCLOUD_APP_KEY", "test-app-key")
os.environ.setdefault("LIVEROOM_RONGCLOUD_SECRET", "test-app-secret")


@pytest.fixture
def publish_payload() -> dict[str, Any]:
    """Default publish body used by API tests."""
    return {"roomId": "r1", "mcuUrl": "u1", "roomName": "Room1", "pubUserId": "u100"}


class FakeTokenIssuer:
    """In-process stand-in for the IM provider."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[str] = []

    def issue_token(self, user_id: str) -> dict[str, Any]:
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        return {"userId": user_id, "token": f"token-{user_id}"}


@pytest.fixture
def fake_issuer() -> FakeTokenIssuer:
    return FakeTokenIssuer()
