"""IM user REST routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends

from liveroom.api.deps import get_token_issuer
from liveroom.api.errors import raise_server_error
from liveroom.api.http import api_ok
from liveroom.im.issuer import TokenIssuer
from liveroom.im.issuer import TokenIssuerError
from liveroom.im.models import TokenRequest

router = APIRouter()


@router.post("/user/get_token")
def get_token(
    payload: TokenRequest,
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> dict[str, object]:
    """Issue an IM token for the user through the provider."""
    try:
        result = issuer.issue_token(payload.id)
    except TokenIssuerError as exc:
        raise_server_error(str(exc), exc)
    return api_ok(result=result)
