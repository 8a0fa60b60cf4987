"""Expand a usage match to the markup that surrounds it.

Editors report a match as a point. When the reference sits inside a tag that
spans several lines (typical for JSX), or inside an ``<svg>`` authored
directly in source, callers want the whole span instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Bounds on the backward search for an enclosing tag
MAX_CANDIDATES = 50
MAX_LOOKBEHIND = 5000

_TAG_START_RE = re.compile(r"<[A-Za-z]")
_SVG_OPEN_RE = re.compile(r"<svg\b", re.IGNORECASE)
_SVG_TOKEN_RE = re.compile(r"<svg\b|</svg\s*>", re.IGNORECASE)

# Outside quotes and braces a start tag holds only names, "=" and framework sigils
_TAG_CHARS = frozenset("_-.:@#*()[]$!|=/")


@dataclass(frozen=True)
class ElementSpan:
    text: str
    start: int
    end: int


def _tag_end(text: str, start: int) -> int | None:
    """Offset just past the ``>`` closing the tag opened at ``start``."""
    quote = None
    depth = 0
    i = start + 1
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in "\"'`":
            quote = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth = max(depth - 1, 0)
        elif ch == ">" and depth == 0:
            return i + 1
        elif ch == "<" and depth == 0:
            # A new tag began before this one closed
            return None
        elif depth == 0 and not (ch.isalnum() or ch.isspace() or ch in _TAG_CHARS):
            # Not an attribute list, e.g. the comparison in "a <b ? 1 : 2"
            return None
        i += 1
    return None


def extract_full_element(text: str, index: int) -> ElementSpan | None:
    """The tag around ``index`` when it spans more than one line.

    ``None`` when the tag fits on one line, when ``index`` is not inside any
    tag, or when it lies past the tag's closing ``>``.
    """
    if not 0 <= index < len(text):
        return None
    floor = max(0, index - MAX_LOOKBEHIND)
    candidates = [m.start() for m in _TAG_START_RE.finditer(text, floor, index + 2)]
    for start in reversed(candidates[-MAX_CANDIDATES:]):
        end = _tag_end(text, start)
        if end is None or end <= index:
            continue
        span = text[start:end]
        if "\n" not in span:
            return None
        return ElementSpan(span, start, end)
    return None


def _matching_close(text: str, start: int) -> int | None:
    depth = 0
    for m in _SVG_TOKEN_RE.finditer(text, start):
        if m.group(0).startswith("</"):
            depth -= 1
            if depth == 0:
                return m.end()
        else:
            depth += 1
    return None


def extract_inline_svg(text: str, index: int) -> ElementSpan | None:
    """The innermost ``<svg>...</svg>`` span containing ``index``, nested svgs included."""
    if not 0 <= index < len(text):
        return None
    opens = [m.start() for m in _SVG_OPEN_RE.finditer(text, 0, index + 4)]
    for start in reversed(opens):
        end = _matching_close(text, start)
        if end is not None and end > index:
            return ElementSpan(text[start:end], start, end)
    return None
