"""Animation codec: embed, detect and remove CSS motion presets in SVG markup.

An icon carries at most one embedded animation. It lives in a
``<style id="iconforge-animation">`` block targeting the root ``svg``; the
path-drawing presets add a ``<script id="iconforge-animation-script">`` that
measures each stroke element so ``stroke-dasharray`` can be driven by
``--path-length``.

Older markup may still carry untagged ``<style>`` blocks with keyframes,
untagged path-length scripts, or ``<g class="iconforge-anim-...">`` wrapper
groups; :func:`detect` and :func:`clean` understand those as well.
"""

from __future__ import annotations

import html
import logging
import re
import xml.etree.ElementTree as ET

from pydantic import ValidationError

from iconforge.models.icon import AnimationSpec
from iconforge.svg.xmltree import (
    find_root_tag,
    local_name,
    namespace_of,
    parent_map,
    remove_element,
    resilient,
    serialize,
)

logger = logging.getLogger(__name__)

STYLE_ID = "iconforge-animation"
SCRIPT_ID = "iconforge-animation-script"
WRAPPER_CLASS_PREFIX = "iconforge-anim-"

STROKE_ELEMENTS = ("path", "line", "polyline", "polygon", "circle", "ellipse", "rect")
DRAW_TYPES = frozenset({"draw", "draw-reverse", "draw-loop"})
_PATH_LENGTH_MARKER = "document.currentScript.parentElement"

# Keyframe bodies, keyed by animation name
ANIMATION_PRESETS: dict[str, str] = {
    # Basic
    "spin": "from { transform: rotate(0deg); } to { transform: rotate(360deg); }",
    "spin-reverse": "from { transform: rotate(360deg); } to { transform: rotate(0deg); }",
    "pulse": "0%, 100% { transform: scale(1); opacity: 1; } 50% { transform: scale(1.1); opacity: 0.8; }",
    "pulse-grow": "0%, 100% { transform: scale(1); } 50% { transform: scale(1.2); }",
    "bounce": "0%, 100% { transform: translateY(0); } 50% { transform: translateY(-8px); }",
    "bounce-horizontal": "0%, 100% { transform: translateX(0); } 50% { transform: translateX(8px); }",
    "shake": (
        "0%, 100% { transform: translateX(0); } 25% { transform: translateX(-4px); } "
        "75% { transform: translateX(4px); }"
    ),
    "shake-vertical": (
        "0%, 100% { transform: translateY(0); } 25% { transform: translateY(-4px); } "
        "75% { transform: translateY(4px); }"
    ),
    "fade": "0%, 100% { opacity: 1; } 50% { opacity: 0.3; }",
    "fade-in": "from { opacity: 0; } to { opacity: 1; }",
    "fade-out": "from { opacity: 1; } to { opacity: 0; }",
    "float": "0%, 100% { transform: translateY(0); } 50% { transform: translateY(-6px); }",
    "blink": "0%, 100% { opacity: 1; } 50% { opacity: 0; }",
    "glow": (
        "0%, 100% { filter: drop-shadow(0 0 2px currentColor); } "
        "50% { filter: drop-shadow(0 0 10px currentColor) drop-shadow(0 0 20px currentColor); }"
    ),
    # Attention
    "swing": (
        "0%, 100% { transform: rotate(0deg); transform-origin: top center; } "
        "25% { transform: rotate(15deg); } 75% { transform: rotate(-15deg); }"
    ),
    "wobble": (
        "0%, 100% { transform: translateX(0) rotate(0); } "
        "15% { transform: translateX(-6px) rotate(-5deg); } "
        "30% { transform: translateX(5px) rotate(3deg); } "
        "45% { transform: translateX(-4px) rotate(-3deg); } "
        "60% { transform: translateX(3px) rotate(2deg); } "
        "75% { transform: translateX(-2px) rotate(-1deg); }"
    ),
    "heartbeat": (
        "0%, 100% { transform: scale(1); } 14% { transform: scale(1.15); } "
        "28% { transform: scale(1); } 42% { transform: scale(1.15); } 70% { transform: scale(1); }"
    ),
    "tada": (
        "0%, 100% { transform: scale(1) rotate(0); } "
        "10%, 20% { transform: scale(0.9) rotate(-3deg); } "
        "30%, 50%, 70%, 90% { transform: scale(1.1) rotate(3deg); } "
        "40%, 60%, 80% { transform: scale(1.1) rotate(-3deg); }"
    ),
    # Entrance / exit
    "zoom-in": "from { transform: scale(0); opacity: 0; } to { transform: scale(1); opacity: 1; }",
    "zoom-out": "from { transform: scale(1); opacity: 1; } to { transform: scale(0); opacity: 0; }",
    "flip": (
        "0% { transform: perspective(400px) rotateY(0); } "
        "100% { transform: perspective(400px) rotateY(360deg); }"
    ),
    # Path drawing
    "draw": "from { stroke-dashoffset: var(--path-length, 100); } to { stroke-dashoffset: 0; }",
    "draw-reverse": "from { stroke-dashoffset: 0; } to { stroke-dashoffset: var(--path-length, 100); }",
    "draw-loop": (
        "0% { stroke-dashoffset: var(--path-length, 100); } 45% { stroke-dashoffset: 0; } "
        "55% { stroke-dashoffset: 0; } 100% { stroke-dashoffset: var(--path-length, 100); }"
    ),
}

# Must stay free of "<", ">" and "&" so it survives both XML and regex paths
PATH_LENGTH_SCRIPT = (
    "(function(){ var svg = document.currentScript.parentElement; "
    f"var els = svg.querySelectorAll('{', '.join(STROKE_ELEMENTS)}'); "
    "els.forEach(function(el){ try { var len = el.getTotalLength ? el.getTotalLength() : 100; "
    "el.style.setProperty('--path-length', len); } "
    "catch(e) { el.style.setProperty('--path-length', '100'); } }); })();"
)

_TIMING = r"cubic-bezier\([^)]*\)|steps\([^)]*\)|[a-z][a-z-]*"
_SHORTHAND_RE = re.compile(
    r"animation:\s*([\w-]+)\s+([\d.]+)s\s+(" + _TIMING + r")"
    r"(?:\s+([\d.]+)s)?\s+(\d+|infinite)\s+(normal|reverse|alternate-reverse|alternate)\b"
)
_ANIMATION_NAME_RE = re.compile(r"animation:\s*([\w-]+)")
_ANIMATION_DURATION_RE = re.compile(r"animation:[^;}]*?([\d.]+)s")
_KEYFRAMES_RE = re.compile(r"@keyframes\s+([\w-]+)\s*\{")
_CSS_RULE_RE = re.compile(r"([^{}]+)\{([^{}]*)\}")
# The root svg, its shape elements, or a legacy wrapper group
_ANIMATED_SELECTOR_RE = re.compile(r"\s*(?:svg(?![\w-])|\.iconforge-anim-)")

_TAGGED_STYLE_RE = re.compile(
    r"<style\b[^>]*\bid\s*=\s*[\"']" + STYLE_ID + r"[\"'][^>]*>(.*?)</style\s*>",
    re.DOTALL | re.IGNORECASE,
)
_TAGGED_SCRIPT_RE = re.compile(
    r"<script\b[^>]*\bid\s*=\s*[\"']" + SCRIPT_ID + r"[\"'][^>]*>.*?</script\s*>",
    re.DOTALL | re.IGNORECASE,
)
_UNTAGGED_STYLE_RE = re.compile(r"<style\s*>(.*?)</style\s*>", re.DOTALL | re.IGNORECASE)
_LEGACY_SCRIPT_RE = re.compile(
    r"<script\b[^>]*>(?:(?!</script).)*?" + re.escape(_PATH_LENGTH_MARKER) + r".*?</script\s*>",
    re.DOTALL | re.IGNORECASE,
)
_WRAPPER_RE = re.compile(
    r"<g\s+class\s*=\s*[\"']" + WRAPPER_CLASS_PREFIX + r"[\w-]*[\"']\s*>(.*?)</g\s*>",
    re.DOTALL | re.IGNORECASE,
)


# ── Presets ──────────────────────────────────────────────────────────────


def preset_names() -> list[str]:
    return list(ANIMATION_PRESETS)


def is_draw_type(animation_type: str) -> bool:
    return animation_type in DRAW_TYPES


def default_spec(animation_type: str) -> AnimationSpec:
    """Preset defaults: draw presets run once over 2s, the rest loop every 1s."""
    if animation_type == "draw-loop":
        return AnimationSpec(type=animation_type, duration=2.0, timing="ease-in-out")
    if animation_type in DRAW_TYPES:
        return AnimationSpec(type=animation_type, duration=2.0, timing="ease-in-out", iteration=1)
    return AnimationSpec(type=animation_type)


def keyframes_for(animation_type: str, custom: str | None = None) -> str:
    """``@keyframes`` rule for a preset, or for a custom name with ``custom`` as body."""
    body = ANIMATION_PRESETS.get(animation_type)
    if body is None:
        body = (custom or "").strip()
    return f"@keyframes {animation_type} {{ {body} }}" if body else f"@keyframes {animation_type} {{ }}"


def _seconds(value: float) -> str:
    return f"{value:g}s"


def animation_shorthand(spec: AnimationSpec) -> str:
    parts = [spec.type, _seconds(spec.duration), spec.timing]
    if spec.delay > 0:
        parts.append(_seconds(spec.delay))
    parts.extend([str(spec.iteration), spec.direction])
    return " ".join(parts)


def build_css(spec: AnimationSpec) -> str:
    keyframes = keyframes_for(spec.type, spec.keyframes)
    shorthand = animation_shorthand(spec)
    if spec.type in DRAW_TYPES:
        selector = ", ".join(f"svg {el}" for el in STROKE_ELEMENTS)
        initial = "0" if spec.type == "draw-reverse" else "var(--path-length, 100)"
        fill_mode = "" if spec.type == "draw-loop" else " forwards"
        return (
            f"{keyframes} {selector} {{ stroke-dasharray: var(--path-length, 100); "
            f"stroke-dashoffset: {initial}; animation: {shorthand}{fill_mode}; }}"
        )
    return f"{keyframes} svg {{ animation: {shorthand}; transform-origin: center; }}"


# ── Embed ────────────────────────────────────────────────────────────────


def embed(markup: str, animation_type: str, spec: AnimationSpec | None = None) -> str:
    """Replace whatever animation ``markup`` carries with ``animation_type``."""
    from iconforge.svg.normalizer import ensure_namespace

    if not markup:
        return markup
    if spec is None:
        spec = default_spec(animation_type)
    elif spec.type != animation_type:
        spec = spec.model_copy(update={"type": animation_type})

    css = build_css(spec)
    with_script = spec.type in DRAW_TYPES
    text = ensure_namespace(clean(markup))

    def structured(root: ET.Element) -> str:
        ns = namespace_of(root.tag)
        qualify = (lambda name: f"{{{ns}}}{name}") if ns else (lambda name: name)
        style = ET.Element(qualify("style"), {"id": STYLE_ID})
        style.text = css
        root.insert(0, style)
        if with_script:
            script = ET.Element(qualify("script"), {"id": SCRIPT_ID})
            script.text = PATH_LENGTH_SCRIPT
            root.insert(1, script)
        return serialize(root)

    def fallback(raw: str) -> str:
        tag = find_root_tag(raw)
        if tag is None or tag.group(0).rstrip().endswith("/>"):
            logger.warning("Cannot embed animation: no usable <svg> root")
            return raw
        block = f'<style id="{STYLE_ID}">{html.escape(css, quote=False)}</style>'
        if with_script:
            block += f'<script id="{SCRIPT_ID}">{PATH_LENGTH_SCRIPT}</script>'
        return raw[: tag.end()] + block + raw[tag.end():]

    return resilient(text, structured, fallback, "animation.embed")


# ── Detect ───────────────────────────────────────────────────────────────


def _without_keyframes(css: str) -> str:
    parts = []
    pos = 0
    for m in _KEYFRAMES_RE.finditer(css):
        if m.start() < pos:
            continue
        parts.append(css[pos: m.start()])
        depth = 1
        i = m.end()
        while i < len(css) and depth:
            if css[i] == "{":
                depth += 1
            elif css[i] == "}":
                depth -= 1
            i += 1
        pos = i
    parts.append(css[pos:])
    return "".join(parts)


def is_legacy_css(css: str) -> bool:
    """Untagged animation CSS: keyframes plus animation rules aimed at the icon only.

    A block that also styles the designer's own classes is not ours to remove.
    """
    if "@keyframes" not in css or "animation:" not in css:
        return False
    rest = _without_keyframes(css)
    rules = _CSS_RULE_RE.findall(rest)
    if not rules or _CSS_RULE_RE.sub("", rest).strip():
        return False
    for selectors, _ in rules:
        if not all(_ANIMATED_SELECTOR_RE.match(s) for s in selectors.split(",")):
            return False
    return any("animation:" in body for _, body in rules)


def _style_blocks(markup: str) -> tuple[list[str], list[str]]:
    """(tagged, untagged legacy) style texts, in document order."""

    def structured(root: ET.Element) -> tuple[list[str], list[str]]:
        tagged, legacy = [], []
        for el in root.iter():
            if local_name(el.tag) != "style":
                continue
            content = el.text or ""
            if el.get("id") == STYLE_ID:
                tagged.append(content)
            elif is_legacy_css(content):
                legacy.append(content)
        return tagged, legacy

    def fallback(raw: str) -> tuple[list[str], list[str]]:
        tagged = [html.unescape(m.group(1)) for m in _TAGGED_STYLE_RE.finditer(raw)]
        legacy = [
            html.unescape(m.group(1))
            for m in _UNTAGGED_STYLE_RE.finditer(raw)
            if is_legacy_css(html.unescape(m.group(1)))
        ]
        return tagged, legacy

    return resilient(markup, structured, fallback, "animation.detect")


def _keyframes_body(css: str, name: str) -> str | None:
    """Brace-matched body of ``@keyframes name { ... }``."""
    for m in _KEYFRAMES_RE.finditer(css):
        if m.group(1) != name:
            continue
        depth = 1
        i = m.end()
        while i < len(css) and depth:
            if css[i] == "{":
                depth += 1
            elif css[i] == "}":
                depth -= 1
            i += 1
        return css[m.end(): i - 1].strip()
    return None


def parse_css(css: str) -> AnimationSpec | None:
    """Read the animation shorthand (or a bare keyframes rule) from CSS text."""
    full = _SHORTHAND_RE.search(css)
    if full:
        name = full.group(1)
        fields = {
            "type": name,
            "duration": float(full.group(2)),
            "timing": full.group(3),
            "delay": float(full.group(4)) if full.group(4) else 0.0,
            "iteration": "infinite" if full.group(5) == "infinite" else int(full.group(5)),
            "direction": full.group(6),
        }
    else:
        named = _ANIMATION_NAME_RE.search(css) or _KEYFRAMES_RE.search(css)
        if not named:
            return None
        name = named.group(1)
        fields = {"type": name}
        duration = _ANIMATION_DURATION_RE.search(css)
        if duration:
            fields["duration"] = float(duration.group(1))

    if name not in ANIMATION_PRESETS:
        body = _keyframes_body(css, name)
        if body:
            fields["keyframes"] = body
    try:
        return AnimationSpec(**fields)
    except ValidationError as e:
        logger.debug("Ignoring unreadable animation %r: %s", name, e)
        return None


def detect(markup: str) -> AnimationSpec | None:
    """The embedded animation, preferring the tagged block over legacy ones."""
    if not markup or ("<style" not in markup and "<STYLE" not in markup):
        return None
    tagged, legacy = _style_blocks(markup)
    for css in tagged + legacy:
        found = parse_css(css)
        if found is not None:
            return found
    return None


def has_animation(markup: str) -> bool:
    return detect(markup) is not None


# ── Clean ────────────────────────────────────────────────────────────────


def _is_wrapper(el: ET.Element) -> bool:
    return local_name(el.tag) == "g" and (el.get("class") or "").startswith(WRAPPER_CLASS_PREFIX)


def clean(markup: str) -> str:
    """Remove tagged and legacy animation blocks; unchanged text if none found."""
    if not markup:
        return markup

    def structured(root: ET.Element) -> str:
        parents = parent_map(root)
        doomed, wrappers = [], []
        for el in root.iter():
            name = local_name(el.tag)
            content = el.text or ""
            if name == "style" and (el.get("id") == STYLE_ID or (el.get("id") is None and is_legacy_css(content))):
                doomed.append(el)
            elif name == "script" and (el.get("id") == SCRIPT_ID or _PATH_LENGTH_MARKER in content):
                doomed.append(el)
            elif _is_wrapper(el):
                wrappers.append(el)
        if not doomed and not wrappers:
            return markup
        for el in doomed:
            remove_element(el, parents)
        # Innermost first so nested wrappers unwrap cleanly
        for el in reversed(wrappers):
            remove_element(el, parents, keep_children=True)
        return serialize(root)

    def fallback(raw: str) -> str:
        text = _TAGGED_STYLE_RE.sub("", raw)
        text = _TAGGED_SCRIPT_RE.sub("", text)
        text = _UNTAGGED_STYLE_RE.sub(lambda m: "" if is_legacy_css(html.unescape(m.group(1))) else m.group(0), text)
        text = _LEGACY_SCRIPT_RE.sub("", text)
        previous = None
        while previous != text:
            previous = text
            text = _WRAPPER_RE.sub(r"\1", text)
        return text

    return resilient(markup, structured, fallback, "animation.clean")
