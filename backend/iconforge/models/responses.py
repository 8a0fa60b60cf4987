"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from iconforge.css.sheet import CssSheetStats
from iconforge.models.export_options import GeneratedComponent
from iconforge.models.icon import AnimationSpec
from iconforge.models.usage import UsageMatch


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    targets_registered: int = 0


class TargetInfo(BaseModel):
    id: str
    name: str
    description: str = ""
    export_styles: list[str] = Field(default_factory=list)
    forward_ref: bool = False
    memo: bool = False
    body_modes: list[str] = Field(default_factory=list)


class NormalizeResponse(BaseModel):
    svg: str
    name: str | None = None
    view_box: str | None = None
    width: str | None = None
    height: str | None = None
    body: str = ""


class AnimationResponse(BaseModel):
    svg: str


class AnimationDetectResponse(BaseModel):
    animated: bool = False
    spec: AnimationSpec | None = None


class GenerateResponse(BaseModel):
    components: list[GeneratedComponent]


class CssSheetResponse(BaseModel):
    css: str
    class_names: list[str]
    type_definitions: str | None = None
    stats: CssSheetStats


class SpriteResponse(BaseModel):
    status: str
    ok: bool
    symbols: list[str] = Field(default_factory=list)


class UsageScanResponse(BaseModel):
    matches: list[UsageMatch]
    total: int = 0
