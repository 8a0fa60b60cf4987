"""POST /api/css/generate: CSS icon sheet."""

from __future__ import annotations

from fastapi import APIRouter

from iconforge.css.sheet import generate_sheet
from iconforge.models.icon import IconAsset
from iconforge.models.requests import CssSheetRequest
from iconforge.models.responses import CssSheetResponse

router = APIRouter(prefix="/css")


@router.post("/generate", response_model=CssSheetResponse)
async def generate_css(req: CssSheetRequest) -> CssSheetResponse:
    icons = [IconAsset(name=i.name, markup=i.svg, view_box=i.view_box) for i in req.icons]
    result = generate_sheet(icons, req.options)
    return CssSheetResponse(**result.model_dump())
