"""Instant-messaging provider integration."""

from liveroom.im.issuer import RongCloudTokenIssuer
from liveroom.im.issuer import TokenIssuer
from liveroom.im.issuer import TokenIssuerError
from liveroom.im.models import TokenRequest

__all__ = [
    "RongCloudTokenIssuer",
    "TokenIssuer",
    "TokenIssuerError",
    "TokenRequest",
]
