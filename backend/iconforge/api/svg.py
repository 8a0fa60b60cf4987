"""POST /api/svg/normalize: cleanup and attribute extraction."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from iconforge.config import Settings
from iconforge.dependencies import get_settings
from iconforge.models.requests import NormalizeRequest
from iconforge.models.responses import NormalizeResponse
from iconforge.sprite.persistence import ensure_id
from iconforge.svg.normalizer import clean, ensure_namespace, extract_attributes, extract_body

router = APIRouter(prefix="/svg")


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize(req: NormalizeRequest, settings: Settings = Depends(get_settings)) -> NormalizeResponse:
    cleaned = ensure_namespace(clean(req.svg))
    if req.name:
        cleaned = ensure_id(cleaned, req.name, prefix=settings.id_prefix)
    attrs = extract_attributes(cleaned)
    return NormalizeResponse(
        svg=cleaned,
        name=req.name,
        view_box=attrs.get("viewBox"),
        width=attrs.get("width"),
        height=attrs.get("height"),
        body=extract_body(cleaned),
    )
