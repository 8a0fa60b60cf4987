"""Component export options and generator output."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class Framework(str, enum.Enum):
    REACT = "react"
    PREACT = "preact"
    REACT_NATIVE = "react-native"
    VUE = "vue"
    VUE_SFC = "vue-sfc"
    SVELTE = "svelte"
    ANGULAR = "angular"
    SOLID = "solid"
    QWIK = "qwik"
    LIT = "lit"
    WEB_COMPONENT = "web-component"
    ASTRO = "astro"


class NamingConvention(str, enum.Enum):
    PASCAL = "pascal"
    CAMEL = "camel"
    KEBAB = "kebab"


class ExportStyle(str, enum.Enum):
    NAMED = "named"
    DEFAULT = "default"
    BOTH = "both"


class BodyMode(str, enum.Enum):
    SPRITE = "sprite"
    INLINE = "inline"


class ComponentExportOptions(BaseModel):
    target: Framework = Framework.REACT
    typescript: bool = True
    component_name: str | None = Field(
        default=None,
        description="Overrides the identifier derived from the icon name",
    )
    naming: NamingConvention | None = Field(
        default=None,
        description="File stem convention; None keeps the target's usual one",
    )
    export_style: ExportStyle | None = Field(
        default=None,
        description="None keeps the target's natural export",
    )
    forward_ref: bool = False
    memo: bool = False
    sprite_path: str = "sprite.svg"
    default_size: int | str = 24
    default_color: str = "currentColor"
    body_mode: BodyMode = BodyMode.SPRITE


class GeneratedComponent(BaseModel):
    filename: str
    language: str
    source_text: str
