"""Resilient SVG parsing shared by the normalizer and the animation codec.

Every inspection operation follows the same discipline: try a strict
``xml.etree.ElementTree`` parse and work on the tree; only when the strict
parse fails, fall back to a documented regex transform on the raw text.
The fallback never raises.
"""

from __future__ import annotations

import html
import logging
import re
import xml.etree.ElementTree as ET
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)

_KNOWN_PREFIXES = {XLINK_NS: "xlink", XML_NS: "xml"}

# Quote-aware: a ">" inside an attribute value does not close the tag
ROOT_TAG_RE = re.compile(r"""<svg\b(?:[^>"']|"[^"]*"|'[^']*')*>""", re.IGNORECASE)
ROOT_CLOSE_RE = re.compile(r"</svg\s*>", re.IGNORECASE)
ATTR_RE = re.compile(r"""([\w:.-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")

PROLOG_RE = re.compile(r"<\?xml\b.*?\?>", re.DOTALL | re.IGNORECASE)
DOCTYPE_RE = re.compile(r"<!DOCTYPE\b[^>\[]*(?:\[.*?\])?\s*>", re.DOTALL | re.IGNORECASE)
COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)

T = TypeVar("T")


def local_name(tag: str) -> str:
    """``{ns}name`` -> ``name``."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1] if tag.startswith("{") else tag


def namespace_of(tag: str) -> str | None:
    if isinstance(tag, str) and tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return None


def qualified_attr_name(key: str) -> str:
    """Attribute key as it appears in source (``xlink:href``, ``xml:space``)."""
    ns = namespace_of(key)
    if ns is None:
        return key
    prefix = _KNOWN_PREFIXES.get(ns)
    name = local_name(key)
    return f"{prefix}:{name}" if prefix else name


def try_parse(markup: str) -> ET.Element | None:
    """Strict parse; ``None`` when the markup is not well-formed XML."""
    if not markup or not markup.strip():
        return None
    try:
        return ET.fromstring(markup.strip())
    except ET.ParseError as e:
        logger.debug("Strict SVG parse failed: %s", e)
        return None


def serialize(root: ET.Element) -> str:
    return ET.tostring(root, encoding="unicode")


def resilient(
    markup: str,
    structured: Callable[[ET.Element], T],
    fallback: Callable[[str], T],
    label: str = "svg",
) -> T:
    """Run ``structured`` on the parsed tree, or ``fallback`` on the raw text."""
    root = try_parse(markup)
    if root is not None:
        return structured(root)
    logger.debug("%s: using regex fallback on malformed markup", label)
    return fallback(markup)


def parent_map(root: ET.Element) -> dict[ET.Element, ET.Element]:
    return {child: parent for parent in root.iter() for child in parent}


def remove_element(
    element: ET.Element,
    parents: dict[ET.Element, ET.Element],
    keep_children: bool = False,
) -> None:
    """Detach ``element`` while keeping the surrounding text intact.

    With ``keep_children`` the element is unwrapped: its text and children
    take its place in the parent.
    """
    parent = parents.get(element)
    if parent is None:
        return
    siblings = list(parent)
    index = siblings.index(element)
    carried = ""
    replacement: list[ET.Element] = []
    if keep_children:
        carried = element.text or ""
        replacement = list(element)
        if replacement:
            last = replacement[-1]
            last.tail = (last.tail or "") + (element.tail or "")
        else:
            carried += element.tail or ""
    else:
        carried = element.tail or ""

    if carried:
        if index == 0:
            parent.text = (parent.text or "") + carried
        else:
            prev = siblings[index - 1]
            prev.tail = (prev.tail or "") + carried

    parent.remove(element)
    for offset, child in enumerate(replacement):
        parent.insert(index + offset, child)
        parents[child] = parent


def find_root_tag(markup: str) -> re.Match | None:
    return ROOT_TAG_RE.search(markup or "")


def parse_attributes(tag_text: str) -> dict[str, str]:
    """Ordered attributes of one start tag's text, entity references decoded."""
    attrs: dict[str, str] = {}
    for m in ATTR_RE.finditer(tag_text):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs.setdefault(m.group(1), html.unescape(value))
    return attrs


def root_attributes(markup: str) -> dict[str, str]:
    """Every attribute of the root ``<svg>`` tag except namespace declarations."""

    def structured(root: ET.Element) -> dict[str, str]:
        if local_name(root.tag) != "svg":
            return {}
        return {qualified_attr_name(k): v for k, v in root.attrib.items()}

    def fallback(text: str) -> dict[str, str]:
        m = find_root_tag(text)
        if not m:
            return {}
        return {
            k: v
            for k, v in parse_attributes(m.group(0)[4:]).items()
            if k != "xmlns" and not k.startswith("xmlns:")
        }

    return resilient(markup, structured, fallback, "root_attributes")
