"""TypeScript declarations for a project's icon names.

Two independent sources feed the same output: the symbol ids of a sprite
file, or the exported identifiers of a generated icon-list module. Names are
converted to kebab-case, deduplicated and sorted so regenerations produce
minimal diffs.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from iconforge.generators.naming import to_kebab_case
from iconforge.utils.files import atomic_write_text, read_text

logger = logging.getLogger(__name__)

HEADER = "// Auto-generated by iconforge. Do not edit."

_EXPORT_RE = re.compile(r"export\s+(?:const|let|var|function)\s+([A-Za-z_$][\w$]*)")
_EXPORT_LIST_RE = re.compile(r"export\s*\{([^}]*)\}")


def normalize_names(names) -> list[str]:
    """Kebab-case, deduplicated, alphabetical; empty names dropped."""
    return sorted({kebab for kebab in (to_kebab_case(n) for n in names) if kebab})


def render_declarations(names, type_name: str = "IconName", list_name: str = "iconNames") -> str:
    """Union type, frozen name list and membership guard."""
    ordered = sorted(set(names))
    if ordered:
        union = "\n".join(f"  | '{n}'" for n in ordered)
        union_block = f"export type {type_name} =\n{union};"
    else:
        union_block = f"export type {type_name} = never;"
    items = "\n".join(f"  '{n}'," for n in ordered)
    return (
        f"{HEADER}\n\n"
        f"{union_block}\n\n"
        f"export const {list_name}: readonly {type_name}[] = Object.freeze([\n"
        f"{items}\n"
        "] as const);\n\n"
        f"export function isValidIconName(name: string): name is {type_name} {{\n"
        f"  return ({list_name} as readonly string[]).includes(name);\n"
        "}\n"
    )


def names_from_module(source: str) -> list[str]:
    """Exported identifiers of an icon-list module, as icon names."""
    found = [m.group(1) for m in _EXPORT_RE.finditer(source or "")]
    for block in _EXPORT_LIST_RE.finditer(source or ""):
        for item in block.group(1).split(","):
            exported = item.split(" as ")[-1].strip()
            if exported and exported != "default":
                found.append(exported)
    return [n for n in found if n not in ("icons", "iconNames")]


def write_declarations(names, path: str | Path) -> bool:
    """Write the types file; skipped (``False``) when ``names`` is empty."""
    normalized = normalize_names(names)
    if not normalized:
        logger.info("No icon names found; leaving %s untouched", path)
        return False
    atomic_write_text(path, render_declarations(normalized))
    logger.info("Wrote %d icon names to %s", len(normalized), path)
    return True


def regenerate_from_sprite(sprite_path: str | Path, types_path: str | Path) -> bool:
    from iconforge.sprite.document import SpriteDocument

    text = read_text(sprite_path)
    if text is None:
        return False
    return write_declarations(SpriteDocument.parse(text).ids, types_path)


def regenerate_from_module(module_path: str | Path, types_path: str | Path) -> bool:
    text = read_text(module_path)
    if text is None:
        return False
    return write_declarations(names_from_module(text), types_path)
