"""SVG normalizer: namespace repair, cleanup and root/body extraction.

Everything downstream (animation codec, generators, CSS sheet, sprite) works
on the output of these functions. None of them raise on malformed input.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

from iconforge.svg.xmltree import (
    COMMENT_RE,
    DOCTYPE_RE,
    PROLOG_RE,
    ROOT_CLOSE_RE,
    SVG_NS,
    XLINK_NS,
    XML_NS,
    find_root_tag,
    local_name,
    namespace_of,
    parent_map,
    remove_element,
    resilient,
    root_attributes,
    serialize,
    try_parse,
)

logger = logging.getLogger(__name__)

DEFAULT_VIEW_BOX = "0 0 24 24"
PLACEHOLDER_NAME = "svg-"

# Any other namespace is editor provenance: inkscape, sodipodi, serif, Adobe, Boxy
ELEMENT_NAMESPACES = {None, SVG_NS}
ATTRIBUTE_NAMESPACES = {None, XLINK_NS, XML_NS}

_WS_RE = re.compile(r"\s+")

# Default namespace declarations on the root tag, well-formed or not
_XMLNS_DECL_RE = re.compile(r"""\s+xmlns(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>/"']+))?(?=[\s/>])""")
_XMLNS_GOOD_RE = re.compile(r"""\s+xmlns\s*=\s*(["'])([^"']*)\1""")

# Regex cleanup for markup that does not parse
_METADATA_RE = re.compile(r"<metadata\b[^>]*?(?:/>|>.*?</metadata\s*>)", re.DOTALL | re.IGNORECASE)
_EDITOR_ELEMENT_RE = re.compile(
    r"<((?!svg:|xlink:)[A-Za-z_][\w.-]*):([\w.-]+)\b[^>]*?(?:/>|>.*?</\1:\2\s*>)",
    re.DOTALL,
)
# Prefixed attributes and prefix declarations, except xlink/xml
_EDITOR_ATTR_RE = re.compile(
    r"""\s+(?:xmlns:(?!xlink\s*=)[\w.-]+|(?!xlink:|xml:|xmlns:)[A-Za-z_][\w.-]*:[\w.-]+)"""
    r"""\s*=\s*(?:"[^"]*"|'[^']*')"""
)
_PROVENANCE_ATTR_RE = re.compile(r"""\s+(?:data-name|xml:space)\s*=\s*(?:"[^"]*"|'[^']*')""")
_ROOT_VERSION_RE = re.compile(r"""(<svg\b[^>]*?)\s+version\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE)
_TAG_GAP_RE = re.compile(r">\s+<")

_EXTENSIONS_RE = re.compile(r"(\.[a-z0-9]{1,5})+$", re.IGNORECASE)
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


# ── Namespace ────────────────────────────────────────────────────────────


def _insert_namespace(markup: str, tag: re.Match) -> str:
    start = tag.start() + len("<svg")
    return f'{markup[:start]} xmlns="{SVG_NS}"{markup[start:]}'


def ensure_namespace(markup: str) -> str:
    """Guarantee exactly one SVG namespace declaration on the root element."""
    if not markup:
        return markup
    tag = find_root_tag(markup)
    if tag is None:
        return markup

    def structured(root: ET.Element) -> str:
        if local_name(root.tag) != "svg":
            return markup
        ns = namespace_of(root.tag)
        if ns == SVG_NS:
            return markup
        tag_text = tag.group(0)
        if ns is not None:
            fixed = _XMLNS_GOOD_RE.sub(f' xmlns="{SVG_NS}"', tag_text, count=1)
            return markup[: tag.start()] + fixed + markup[tag.end():]
        return _insert_namespace(markup, tag)

    def fallback(text: str) -> str:
        tag_text = tag.group(0)
        declarations = _XMLNS_DECL_RE.findall(tag_text)
        good = _XMLNS_GOOD_RE.findall(tag_text)
        if len(declarations) == 1 and len(good) == 1 and good[0][1] == SVG_NS:
            return text
        stripped = _XMLNS_DECL_RE.sub("", tag_text)
        fixed = f'<svg xmlns="{SVG_NS}"{stripped[len("<svg"):]}'
        return text[: tag.start()] + fixed + text[tag.end():]

    return resilient(markup, structured, fallback, "ensure_namespace")


# ── Cleanup ──────────────────────────────────────────────────────────────


def _is_editor_key(key: str) -> bool:
    return namespace_of(key) not in ATTRIBUTE_NAMESPACES


def _clean_tree(root: ET.Element) -> str:
    parents = parent_map(root)
    doomed = [
        el
        for el in root.iter()
        if el is not root
        and (
            not isinstance(el.tag, str)
            or local_name(el.tag) == "metadata"
            or namespace_of(el.tag) not in ELEMENT_NAMESPACES
        )
    ]
    for el in doomed:
        # A nested doomed element may already be gone with its ancestor
        if el in parents and el in list(parents[el]):
            remove_element(el, parents)

    for key in ("version",):
        root.attrib.pop(key, None)

    for el in root.iter():
        for key in list(el.attrib):
            if _is_editor_key(key) or key in ("data-name", f"{{{XML_NS}}}space"):
                del el.attrib[key]
            else:
                el.attrib[key] = _WS_RE.sub(" ", el.attrib[key]).strip()
        el.text = _collapse(el.text)
        el.tail = _collapse(el.tail)
    return serialize(root)


def _collapse(text: str | None) -> str | None:
    if text is None or not text.strip():
        return None
    return _WS_RE.sub(" ", text)


def _clean_text(text: str) -> str:
    text = _METADATA_RE.sub("", text)
    text = _EDITOR_ELEMENT_RE.sub("", text)
    text = _EDITOR_ATTR_RE.sub("", text)
    text = _PROVENANCE_ATTR_RE.sub("", text)
    text = _ROOT_VERSION_RE.sub(r"\1", text)
    text = _WS_RE.sub(" ", text)
    text = _TAG_GAP_RE.sub("><", text)
    return text.strip()


def clean(markup: str) -> str:
    """Strip prolog, DOCTYPE, comments, metadata and editor provenance.

    Whitespace runs collapse to single spaces and whitespace-only gaps
    between elements disappear. ``clean(clean(x)) == clean(x)``.
    """
    if not markup:
        return ""
    text = PROLOG_RE.sub("", markup)
    text = DOCTYPE_RE.sub("", text)
    text = COMMENT_RE.sub("", text)

    def fallback(raw: str) -> str:
        patched = _clean_text(raw)
        # Dropping unbound editor prefixes often makes the markup parse
        root = try_parse(patched)
        return _clean_tree(root) if root is not None else patched

    return resilient(text, _clean_tree, fallback, "clean")


# ── Extraction ───────────────────────────────────────────────────────────


def extract_body(markup: str) -> str:
    """Inner markup of the root ``<svg>``, minus any embedded animation."""
    from iconforge.svg.animation import clean as clean_animation

    if not markup:
        return ""
    text = clean_animation(markup)
    tag = find_root_tag(text)
    if tag is None:
        return text.strip()
    if tag.group(0).rstrip().endswith("/>"):
        return ""
    closes = list(ROOT_CLOSE_RE.finditer(text, tag.end()))
    end = closes[-1].start() if closes else len(text)
    return text[tag.end():end].strip()


def extract_root_attributes(markup: str) -> dict[str, str]:
    return root_attributes(markup)


def extract_attributes(markup: str) -> dict[str, str]:
    """``viewBox``/``width``/``height`` as found on the root, no defaults."""
    attrs = root_attributes(markup)
    return {k: attrs[k] for k in ("viewBox", "width", "height") if k in attrs}


def extract_name(value: str) -> str:
    """Canonical icon name from a file path.

    Non-path input yields the ``svg-`` placeholder; an embedded id or title
    is deliberately not consulted.
    """
    if not value or ("/" not in value and "\\" not in value):
        return PLACEHOLDER_NAME
    base = re.split(r"[\\/]", value.rstrip("/\\"))[-1]
    base = _EXTENSIONS_RE.sub("", base)
    slug = _NON_ALNUM_RE.sub("-", base.lower()).strip("-")
    return slug or PLACEHOLDER_NAME


def view_box_or_default(markup: str, view_box: str | None = None) -> str:
    """The markup's own viewBox, else ``view_box``, else ``DEFAULT_VIEW_BOX``."""
    return extract_attributes(markup).get("viewBox") or view_box or DEFAULT_VIEW_BOX
