"""Component generation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from iconforge.generators import available_targets, generate, generate_batch, resolve_target
from iconforge.models.icon import IconAsset
from iconforge.models.requests import GenerateRequest
from iconforge.models.responses import GenerateResponse, TargetInfo

router = APIRouter(prefix="/components")


@router.get("/targets", response_model=list[TargetInfo])
async def targets() -> list[TargetInfo]:
    return [TargetInfo(**t) for t in available_targets()]


@router.post("/generate", response_model=GenerateResponse)
async def generate_components(req: GenerateRequest) -> GenerateResponse:
    try:
        options = req.options
        if req.target is not None:
            options = options.model_copy(update={"target": resolve_target(req.target)})
        assets = [IconAsset.from_svg(i.name, i.svg, view_box=i.view_box) for i in req.icons]
        if len(assets) == 1:
            components = [generate(assets[0], options)]
        else:
            components = generate_batch(assets, options)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return GenerateResponse(components=components)
