"""Mounts the health and avatar routers under /api."""

from __future__ import annotations

from fastapi import APIRouter

from gummygrid.api import avatar, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(avatar.router)
