"""Canonical icon records shared by every part of the engine."""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

_ANIMATION_NAME_RE = re.compile(r"^[A-Za-z_][\w-]*$")
_TIMING_RE = re.compile(r"^(?:[a-z-]+|cubic-bezier\(\s*[-\d.]+(?:\s*,\s*[-\d.]+){3}\s*\)|steps\([^)]*\))$")


class AnimationSpec(BaseModel):
    """CSS motion preset embedded in an icon by the animation codec."""

    type: str = Field(..., min_length=1, description="Preset or custom keyframes name")
    duration: float = Field(default=1.0, gt=0, description="Seconds")
    timing: str = "ease"
    iteration: Annotated[int, Field(gt=0)] | Literal["infinite"] = "infinite"
    direction: Literal["normal", "reverse", "alternate", "alternate-reverse"] = "normal"
    delay: float = Field(default=0.0, ge=0, description="Seconds")
    keyframes: str | None = Field(
        default=None,
        description="Keyframe rule body for custom animation names",
    )

    model_config = {"frozen": True}

    @field_validator("type")
    @classmethod
    def _check_type(cls, value: str) -> str:
        if not _ANIMATION_NAME_RE.match(value):
            raise ValueError(f"Invalid animation name: {value!r}")
        return value

    @field_validator("timing")
    @classmethod
    def _check_timing(cls, value: str) -> str:
        value = value.strip()
        if not _TIMING_RE.match(value):
            raise ValueError(f"Invalid timing function: {value!r}")
        return value


class IconAsset(BaseModel):
    """One icon, independent of any target framework.

    ``name`` never changes once the icon is in the sprite; updates go through
    :meth:`with_markup` / :meth:`with_animation`, which return copies.
    """

    name: str = Field(..., min_length=1, description="Canonical kebab-case name")
    markup: str = Field(..., description="Raw SVG markup")
    view_box: str | None = None
    width: str | None = None
    height: str | None = None
    id: str | None = Field(default=None, description="Sprite symbol id")
    animation: AnimationSpec | None = None

    model_config = {"frozen": True}

    @property
    def symbol_id(self) -> str:
        return self.id or self.name

    def with_markup(self, markup: str) -> IconAsset:
        return self.model_copy(update={"markup": markup})

    def with_animation(self, animation: AnimationSpec | None) -> IconAsset:
        return self.model_copy(update={"animation": animation})

    @classmethod
    def from_svg(cls, name: str, markup: str, **extra) -> IconAsset:
        """Build an asset, reading viewBox/width/height off the root tag."""
        from iconforge.svg.normalizer import extract_attributes

        attrs = extract_attributes(markup)
        fields = {"view_box": attrs.get("viewBox"), "width": attrs.get("width"), "height": attrs.get("height")}
        # Explicit values win over the markup, but None never erases one
        fields.update({k: v for k, v in extra.items() if v is not None})
        return cls(name=name, markup=markup, **fields)
