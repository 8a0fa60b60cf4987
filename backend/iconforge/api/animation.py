"""POST /api/animation/*: embed, detect and strip CSS animations."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from iconforge.models.requests import AnimationEmbedRequest, NormalizeRequest
from iconforge.models.responses import AnimationDetectResponse, AnimationResponse
from iconforge.svg import animation as codec

router = APIRouter(prefix="/animation")


@router.get("/presets")
async def presets() -> list[str]:
    return codec.preset_names()


@router.post("/embed", response_model=AnimationResponse)
async def embed(req: AnimationEmbedRequest) -> AnimationResponse:
    try:
        svg = codec.embed(req.svg, req.type, req.spec)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return AnimationResponse(svg=svg)


@router.post("/detect", response_model=AnimationDetectResponse)
async def detect(req: NormalizeRequest) -> AnimationDetectResponse:
    spec = codec.detect(req.svg)
    return AnimationDetectResponse(animated=spec is not None, spec=spec)


@router.post("/clean", response_model=AnimationResponse)
async def clean(req: NormalizeRequest) -> AnimationResponse:
    return AnimationResponse(svg=codec.clean(req.svg))
