"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class AvatarResponse(BaseModel):
    svg: str
    data_uri: str
    colors: dict[str, str] = Field(default_factory=dict)
