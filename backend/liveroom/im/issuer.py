"""IM user token issuance through the RongCloud server API."""

from __future__ import annotations

import hashlib
import logging
import secrets
import time
from typing import Any
from typing import Protocol

import httpx

from liveroom.core.config import Settings

logger = logging.getLogger(__name__)

REGISTER_USER_PATH = "/user/getToken.json"
PROVIDER_SUCCESS_CODE = 200


class TokenIssuerError(Exception):
    """Raised when the IM provider cannot issue a token."""


class TokenIssuer(Protocol):
    def issue_token(self, user_id: str) -> dict[str, Any]: ...


def sign_request(*, secret: str, nonce: str, timestamp: str) -> str:
    """RongCloud request signature: sha1 hex of secret + nonce + timestamp."""
    return hashlib.sha1(f"{secret}{nonce}{timestamp}".encode("utf-8")).hexdigest()


class RongCloudTokenIssuer:
    """Registers the user with RongCloud and returns the provider token result."""

    def __init__(
        self,
        *,
        app_key: str,
        secret: str,
        api_url: str,
        portrait_uri: str,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._app_key = app_key
        self._secret = secret
        self._portrait_uri = portrait_uri
        self._client = httpx.Client(
            base_url=api_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ) -> "RongCloudTokenIssuer":
        return cls(
            app_key=settings.liveroom_rongcloud_app_key,
            secret=settings.liveroom_rongcloud_secret,
            api_url=settings.liveroom_rongcloud_api_url,
            portrait_uri=settings.liveroom_im_portrait_uri,
            timeout_seconds=settings.liveroom_rongcloud_timeout_seconds,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def _auth_headers(self) -> dict[str, str]:
        nonce = str(secrets.randbelow(10**9))
        timestamp = str(int(time.time()))
        return {
            "App-Key": self._app_key,
            "Nonce": nonce,
            "Timestamp": timestamp,
            "Signature": sign_request(secret=self._secret, nonce=nonce, timestamp=timestamp),
        }

    def issue_token(self, user_id: str) -> dict[str, Any]:
        """Register user_id (named after itself) and return {"userId", "token"}."""
        if not user_id:
            raise ValueError("user_id must not be empty")

        try:
            response = self._client.post(
                REGISTER_USER_PATH,
                data={"userId": user_id, "name": user_id, "portraitUri": self._portrait_uri},
                headers=self._auth_headers(),
            )
        except httpx.HTTPError as exc:
            logger.warning("IM token request for user %s failed: %s", user_id, exc)
            raise TokenIssuerError(f"IM provider request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("IM provider returned HTTP %s with a non-JSON body", response.status_code)
            raise TokenIssuerError(
                f"IM provider returned HTTP {response.status_code} with an invalid body"
            ) from exc

        if not isinstance(payload, dict) or payload.get("code") != PROVIDER_SUCCESS_CODE:
            code = payload.get("code") if isinstance(payload, dict) else None
            message = payload.get("errorMessage") if isinstance(payload, dict) else None
            logger.warning("IM provider rejected user %s: code=%s message=%s", user_id, code, message)
            raise TokenIssuerError(message or f"IM provider error code={code} (HTTP {response.status_code})")

        return {"userId": payload.get("userId", user_id), "token": payload.get("token", "")}


__all__ = [
    "PROVIDER_SUCCESS_CODE",
    "REGISTER_USER_PATH",
    "RongCloudTokenIssuer",
    "TokenIssuer",
    "TokenIssuerError",
    "sign_request",
]
