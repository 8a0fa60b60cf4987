"""POST /api/sprite/*: targeted sprite updates under the configured output directory."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from iconforge.config import Settings
from iconforge.dependencies import get_settings
from iconforge.models.icon import IconAsset
from iconforge.models.requests import SpriteAddRequest, SpriteUpdateRequest
from iconforge.models.responses import SpriteResponse
from iconforge.sprite.persistence import add_to_sprite, list_symbols, update_sprite_symbol
from iconforge.utils.files import resolve_within

router = APIRouter(prefix="/sprite")


def _sprite_path(settings: Settings, sprite_path: str) -> Path:
    try:
        return resolve_within(settings.output_directory, sprite_path)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/update", response_model=SpriteResponse)
def update(req: SpriteUpdateRequest, settings: Settings = Depends(get_settings)) -> SpriteResponse:
    path = _sprite_path(settings, req.sprite_path)
    status = update_sprite_symbol(req.name, req.svg, path, req.view_box, types_filename=settings.types_filename)
    return SpriteResponse(status=status.value, ok=status.ok, symbols=list_symbols(path))


@router.post("/add", response_model=SpriteResponse)
def add(req: SpriteAddRequest, settings: Settings = Depends(get_settings)) -> SpriteResponse:
    path = _sprite_path(settings, req.sprite_path)
    asset = IconAsset.from_svg(req.icon.name, req.icon.svg, view_box=req.icon.view_box)
    status = add_to_sprite(asset, path, types_filename=settings.types_filename)
    return SpriteResponse(status=status.value, ok=status.ok, symbols=list_symbols(path))
