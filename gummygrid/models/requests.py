"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class AvatarRequest(BaseModel):
    seed: str = Field(..., description="Any string; the same seed always gives the same avatar")
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial generator configuration merged over the defaults",
    )
