"""Color token extraction for mono/multi-color classification.

Works on raw text so malformed markup is handled the same way as clean
markup. Tokens come from ``fill``/``stroke``/``stop-color`` attributes,
``style`` attributes and ``<style>`` rules alike.
"""

from __future__ import annotations

import re

_ATTR_COLOR_RE = re.compile(r"""(?<![\w:-])(fill|stroke|stop-color)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_CSS_COLOR_RE = re.compile(r"""(?<![\w-])(fill|stroke|stop-color)\s*:\s*([^;"'}<]+)""")
_SPACES_RE = re.compile(r"\s+")

NON_CONCRETE = frozenset({"", "none", "currentcolor", "transparent", "inherit", "initial", "unset"})

_NAMED_COLORS = {
    "black": "#000000", "white": "#ffffff", "red": "#ff0000",
    "green": "#008000", "blue": "#0000ff", "yellow": "#ffff00",
}


def normalize_color(value: str) -> str | None:
    """Canonical form of a concrete color, or ``None`` for non-colors."""
    if value is None:
        return None
    color = value.replace("!important", "").strip().lower()
    if color in NON_CONCRETE or color.startswith("url(") or color.startswith("var("):
        return None
    color = _NAMED_COLORS.get(color, color)
    if color.startswith("#"):
        digits = color[1:]
        if len(digits) in (3, 4):
            color = "#" + "".join(ch * 2 for ch in digits)
        if len(color) == 9 and color.endswith("ff"):
            color = color[:7]
        return color
    return _SPACES_RE.sub("", color)


def color_tokens(markup: str) -> list[str]:
    """Every raw fill/stroke/stop-color value, in document order."""
    if not markup:
        return []
    tokens: list[tuple[int, str]] = []
    for m in _ATTR_COLOR_RE.finditer(markup):
        tokens.append((m.start(), m.group(2) if m.group(2) is not None else m.group(3)))
    for m in _CSS_COLOR_RE.finditer(markup):
        tokens.append((m.start(), m.group(2)))
    return [value for _, value in sorted(tokens)]


def concrete_colors(markup: str) -> list[str]:
    """Distinct concrete colors, first-seen order."""
    seen: dict[str, None] = {}
    for token in color_tokens(markup):
        color = normalize_color(token)
        if color is not None:
            seen.setdefault(color, None)
    return list(seen)
