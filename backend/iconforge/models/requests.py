"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from iconforge.css.sheet import CssSheetOptions
from iconforge.models.export_options import ComponentExportOptions
from iconforge.models.icon import AnimationSpec


class IconInput(BaseModel):
    name: str = Field(..., min_length=1, description="Canonical icon name")
    svg: str = Field(..., description="Raw SVG markup")
    view_box: str | None = None


class NormalizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG markup")
    name: str | None = Field(default=None, description="Inject a root id from this name when none exists")


class AnimationEmbedRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG markup")
    type: str = Field(..., description="Preset or custom animation name")
    spec: AnimationSpec | None = Field(default=None, description="Overrides the preset defaults")


class GenerateRequest(BaseModel):
    icons: list[IconInput] = Field(..., min_length=1)
    target: str | None = Field(default=None, description="Overrides options.target; unknown names fail")
    options: ComponentExportOptions = Field(default_factory=ComponentExportOptions)


class CssSheetRequest(BaseModel):
    icons: list[IconInput] = Field(..., min_length=1)
    options: CssSheetOptions = Field(default_factory=CssSheetOptions)


class SpriteUpdateRequest(BaseModel):
    name: str = Field(..., description="Symbol id to rewrite")
    svg: str = Field(..., description="New SVG markup")
    sprite_path: str = Field(..., description="Sprite file, relative to the output directory")
    view_box: str | None = None


class SpriteAddRequest(BaseModel):
    icon: IconInput
    sprite_path: str = Field(..., description="Sprite file, relative to the output directory")


class UsageScanRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Icon name to look for")
    root: str | None = Field(default=None, description="Directory to scan, relative to the workspace root")
    text: str | None = Field(default=None, description="Scan this text instead of a directory")
    include: list[str] | None = None
    exclude: list[str] = Field(default_factory=list)
