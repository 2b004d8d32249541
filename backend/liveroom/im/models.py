"""Pydantic models for IM APIs."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field


class TokenRequest(BaseModel):
    """POST /user/get_token request body."""

    id: str = Field(min_length=1)
