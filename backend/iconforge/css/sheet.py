"""CSS icon sheet: one stylesheet with a class per icon.

Mono-color icons are painted through ``mask-image`` with
``background-color: currentColor`` so consumers recolor them with plain CSS;
multi-color icons keep their baked-in palette as ``background-image``.
"""

from __future__ import annotations

import enum
import logging
import re
from pathlib import Path
from urllib.parse import quote

from pydantic import BaseModel, Field

from iconforge.models.icon import IconAsset
from iconforge.sprite.types_file import render_declarations
from iconforge.svg.colors import concrete_colors
from iconforge.svg.normalizer import clean, ensure_namespace
from iconforge.utils.files import atomic_write_text

logger = logging.getLogger(__name__)

_NON_CLASS_RE = re.compile(r"[^a-z0-9_-]+")
_DATA_URI_SAFE = " /:=';,.-_()!*~@+$?&[]|"
_WS_RE = re.compile(r"\s+")


class ColorUsage(str, enum.Enum):
    MONO = "mono"
    MULTI = "multi"


class CssSheetOptions(BaseModel):
    prefix: str = "icon"
    filename: str = "icons"
    size: int | str = 24
    css_variables: bool = True
    generate_types: bool = False
    minify: bool = False


class CssSheetStats(BaseModel):
    total_icons: int = 0
    mono_color_icons: int = 0
    multi_color_icons: int = 0
    total_size: int = Field(default=0, description="Stylesheet size in bytes")


class CssSheetResult(BaseModel):
    css: str
    class_names: list[str]
    type_definitions: str | None = None
    stats: CssSheetStats


# ── Classification / encoding ────────────────────────────────────────────


def classify_colors(markup: str) -> ColorUsage:
    """Two or more distinct concrete colors make an icon multi-color."""
    return ColorUsage.MULTI if len(concrete_colors(markup)) >= 2 else ColorUsage.MONO


def is_multi_color(markup: str) -> bool:
    return classify_colors(markup) == ColorUsage.MULTI


def svg_to_data_uri(markup: str) -> str:
    """``data:image/svg+xml,`` URI safe to embed inside ``url("...")``."""
    text = ensure_namespace(clean(markup))
    text = _WS_RE.sub(" ", text.replace('"', "'")).strip()
    return "data:image/svg+xml," + quote(text, safe=_DATA_URI_SAFE)


def class_slug(name: str) -> str:
    """``mdi:home-outline`` -> ``mdi-home-outline``; ``ArrowRight`` -> ``arrowright``."""
    return _NON_CLASS_RE.sub("-", name.lower()).strip("-")


def _css_size(size: int | str) -> str:
    return f"{size}px" if isinstance(size, int) else str(size)


# ── Rendering ────────────────────────────────────────────────────────────


def _render(rules: list[tuple[str, list[tuple[str, str]]]], minify: bool) -> str:
    if minify:
        return "\n".join(
            selector + "{" + ";".join(f"{p}:{v}" for p, v in decls) + "}" for selector, decls in rules
        ) + "\n"
    blocks = []
    for selector, decls in rules:
        body = "\n".join(f"  {p}: {v};" for p, v in decls)
        blocks.append(f"{selector} {{\n{body}\n}}")
    return "\n\n".join(blocks) + "\n"


def _types(slugs: list[str], prefix: str) -> str:
    declarations = render_declarations(slugs)
    return (
        declarations
        + "\n"
        + "export function getIconClass(name: IconName): string {\n"
        + f"  return `{prefix} {prefix}-${{name}}`;\n"
        + "}\n"
    )


def generate_sheet(icons: list[IconAsset], options: CssSheetOptions | None = None) -> CssSheetResult:
    options = options or CssSheetOptions()
    prefix = options.prefix
    size = _css_size(options.size)

    rules: list[tuple[str, list[tuple[str, str]]]] = []
    if options.css_variables:
        rules.append((":root", [("--icon-size", size), ("--icon-color", "currentColor")]))

    base = [
        ("display", "inline-block"),
        ("width", "var(--icon-size)" if options.css_variables else size),
        ("height", "var(--icon-size)" if options.css_variables else size),
        ("vertical-align", "middle"),
        ("flex-shrink", "0"),
    ]
    if options.css_variables:
        base.append(("color", "var(--icon-color)"))
    rules.append((f".{prefix}", base))

    class_names: list[str] = []
    seen: set[str] = set()
    mono = multi = 0
    for icon in icons:
        slug = class_slug(icon.name)
        if not slug or slug in seen:
            logger.warning("Skipping icon %r: empty or duplicate class name", icon.name)
            continue
        seen.add(slug)
        class_name = f"{prefix}-{slug}"
        class_names.append(class_name)
        url = f'url("{svg_to_data_uri(icon.markup)}")'
        if classify_colors(icon.markup) == ColorUsage.MULTI:
            multi += 1
            decls = [
                ("background-image", url),
                ("background-repeat", "no-repeat"),
                ("background-position", "center"),
                ("background-size", "contain"),
                ("background-color", "transparent"),
            ]
        else:
            mono += 1
            decls = [
                ("-webkit-mask-image", url),
                ("mask-image", url),
                ("-webkit-mask-repeat", "no-repeat"),
                ("mask-repeat", "no-repeat"),
                ("-webkit-mask-position", "center"),
                ("mask-position", "center"),
                ("-webkit-mask-size", "contain"),
                ("mask-size", "contain"),
                ("background-color", "currentColor"),
            ]
        rules.append((f".{class_name}", decls))

    css = _render(rules, options.minify)
    if not options.minify:
        header = (
            "/* Auto-generated by iconforge. Do not edit. */\n"
            f"/* {len(class_names)} icons: {mono} mono-color, {multi} multi-color */\n\n"
        )
        css = header + css

    slugs = [c[len(prefix) + 1:] for c in class_names]
    return CssSheetResult(
        css=css,
        class_names=class_names,
        type_definitions=_types(slugs, prefix) if options.generate_types else None,
        stats=CssSheetStats(
            total_icons=len(class_names),
            mono_color_icons=mono,
            multi_color_icons=multi,
            total_size=len(css.encode("utf-8")),
        ),
    )


def generate_and_save(
    icons: list[IconAsset],
    output_dir: str | Path,
    options: CssSheetOptions | None = None,
) -> CssSheetResult:
    """Write ``<filename>.css`` (and ``<filename>.css.d.ts``) under ``output_dir``."""
    options = options or CssSheetOptions()
    result = generate_sheet(icons, options)
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    atomic_write_text(out / f"{options.filename}.css", result.css)
    if result.type_definitions is not None:
        atomic_write_text(out / f"{options.filename}.css.d.ts", result.type_definitions)
    logger.info(
        "Wrote %s.css with %d icons (%d bytes)", options.filename, result.stats.total_icons, result.stats.total_size
    )
    return result
