"""Identifier conversions shared by every generator and the sprite engine."""

from __future__ import annotations

import re

_WORD_SPLIT_RE = re.compile(r"[-_:\s./\\]+")
_CAMEL_RE = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_NON_IDENT_RE = re.compile(r"[^A-Za-z0-9_$]")
_NON_KEBAB_RE = re.compile(r"[^a-z0-9-]+")
_VALID_NAME_RE = re.compile(r"^[a-z][a-z0-9]*(?:[-:][a-z0-9]+)*$")


def _words(name: str) -> list[str]:
    if not name:
        return []
    spaced = _ACRONYM_RE.sub(r"\1 \2", _CAMEL_RE.sub(r"\1 \2", name))
    return [w for w in _WORD_SPLIT_RE.split(spaced) if w]


def to_pascal_case(name: str) -> str:
    """``arrow-left`` / ``arrow_left`` / ``arrowLeft`` -> ``ArrowLeft``."""
    return "".join(w[:1].upper() + w[1:].lower() for w in _words(name))


def to_camel_case(name: str) -> str:
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def to_kebab_case(name: str) -> str:
    """``ArrowRight`` -> ``arrow-right``; anything non-alphanumeric becomes ``-``."""
    kebab = "-".join(w.lower() for w in _words(name))
    return _NON_KEBAB_RE.sub("-", kebab).strip("-")


def to_snake_case(name: str) -> str:
    return to_kebab_case(name).replace("-", "_")


def sanitize_identifier(name: str, prefix: str = "Icon") -> str:
    """Valid JS identifier; a leading digit gets ``prefix`` in front."""
    result = _NON_IDENT_RE.sub("_", name or "")
    result = re.sub(r"_+", "_", result)
    if not result or result == "_":
        return prefix
    if result[0].isdigit():
        result = prefix + result
    return result


def to_component_name(name: str) -> str:
    return sanitize_identifier(to_pascal_case(name))


def to_variable_name(name: str) -> str:
    """Icon-list module variable: ``mdi:home`` -> ``mdiHome``."""
    return sanitize_identifier(to_camel_case(name), prefix="icon")


def to_custom_element_name(name: str) -> str:
    """``arrow-left`` -> ``arrow-left-icon``; always contains a hyphen."""
    tag = to_kebab_case(name) or "icon"
    if tag[0].isdigit():
        tag = f"icon-{tag}"
    if not tag.endswith("-icon"):
        tag = f"{tag}-icon"
    return tag


def parse_icon_prefix(icon_name: str) -> tuple[str | None, str]:
    """``mdi:home`` -> ``("mdi", "home")``; no prefix -> ``(None, name)``."""
    if not icon_name:
        return None, ""
    prefix, sep, rest = icon_name.partition(":")
    if sep and prefix:
        return prefix, rest
    return None, icon_name


def is_valid_icon_name(name: str) -> bool:
    return bool(name) and bool(_VALID_NAME_RE.match(name))


def generate_unique_name(base_name: str, existing: set[str] | list[str]) -> str:
    """``icon`` with ``{"icon", "icon-1"}`` taken -> ``icon-2``."""
    base_name = base_name or "icon"
    taken = set(existing)
    if base_name not in taken:
        return base_name
    counter = 1
    while f"{base_name}-{counter}" in taken:
        counter += 1
    return f"{base_name}-{counter}"
