"""Avatar endpoints: GET /api/avatar/{seed}.svg and POST /api/avatar."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import ValidationError

from gummygrid.config import Settings
from gummygrid.dependencies import get_settings
from gummygrid.engine.defaults import merge_recursively
from gummygrid.engine.errors import GummyGridError
from gummygrid.engine.generator import GummyGrid
from gummygrid.models.requests import AvatarRequest
from gummygrid.models.responses import AvatarResponse
from gummygrid.models.svg_document import SVG_MIME_TYPE, SvgDocument

logger = logging.getLogger(__name__)

router = APIRouter()


def _render(seed: str, config: dict[str, Any], settings: Settings) -> SvgDocument:
    base = {"randomizer": {"salt": settings.gummygrid_salt}}
    try:
        return GummyGrid(merge_recursively(base, config)).build_from(seed)
    except (GummyGridError, ValidationError) as e:
        logger.info("Rejected avatar config: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.get("/avatar/{seed}.svg")
async def avatar_svg(seed: str, settings: Settings = Depends(get_settings)) -> Response:
    doc = _render(seed, {}, settings)
    return Response(content=doc.markup, media_type=SVG_MIME_TYPE)


@router.post("/avatar", response_model=AvatarResponse)
async def avatar(req: AvatarRequest, settings: Settings = Depends(get_settings)) -> AvatarResponse:
    doc = _render(req.seed, req.config, settings)
    return AvatarResponse(
        svg=doc.markup,
        data_uri=doc.to_url_encoded(with_prefix=True),
        colors=doc.colors,
    )
