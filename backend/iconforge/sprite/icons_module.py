"""Generated icon-list module (``svg-data.ts`` / ``.js`` / ``.json``).

Each icon becomes one exported constant holding its body and viewBox, plus
an ``icons`` map of all of them. Updates splice a single ``body`` template
literal in place.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from iconforge.generators.markup import escape_template_literal, js_string
from iconforge.generators.naming import to_variable_name
from iconforge.models.icon import AnimationSpec, IconAsset
from iconforge.sprite.locks import path_lock
from iconforge.sprite.types_file import HEADER, write_declarations, names_from_module
from iconforge.svg.normalizer import clean, extract_body, view_box_or_default
from iconforge.utils.files import atomic_write_text, read_text

logger = logging.getLogger(__name__)

_BODY_START_RE = re.compile(r"body:\s*`")


def _animation_literal(spec: AnimationSpec) -> str:
    fields = [
        f"type: {js_string(spec.type)}",
        f"duration: {spec.duration:g}",
        f"timing: {js_string(spec.timing)}",
        f"iteration: {js_string(spec.iteration) if isinstance(spec.iteration, str) else spec.iteration}",
        f"direction: {js_string(spec.direction)}",
        f"delay: {spec.delay:g}",
    ]
    return "{ " + ", ".join(fields) + " }"


def _entry(asset: IconAsset) -> tuple[str, str, str]:
    body = extract_body(clean(asset.markup))
    return to_variable_name(asset.name), body, view_box_or_default(asset.markup, asset.view_box)


def render_icons_module(assets: list[IconAsset], fmt: str = "ts") -> str:
    """Module text for ``assets``; ``fmt`` is ``ts``, ``js`` or ``json``."""
    if fmt == "json":
        data = {}
        for asset in assets:
            _, body, view_box = _entry(asset)
            item: dict = {"body": body, "viewBox": view_box}
            if asset.animation is not None:
                item["animation"] = asset.animation.model_dump(exclude_none=True)
            data[asset.name] = item
        return json.dumps(data, indent=2, sort_keys=True) + "\n"

    blocks = [HEADER]
    variables = []
    for asset in sorted(assets, key=lambda a: a.name):
        var, body, view_box = _entry(asset)
        variables.append(var)
        lines = [
            f"export const {var} = {{",
            f"  name: {js_string(asset.name)},",
            f"  body: `{escape_template_literal(body)}`,",
            f"  viewBox: {js_string(view_box)},",
        ]
        if asset.animation is not None:
            lines.append(f"  animation: {_animation_literal(asset.animation)},")
        lines.append("};")
        blocks.append("\n".join(lines))
    if fmt == "ts":
        blocks.append("export type IconData = { name: string; body: string; viewBox: string };")
    items = "".join(f"  {v},\n" for v in variables)
    blocks.append(f"export const icons = {{\n{items}}};")
    return "\n\n".join(blocks) + "\n"


def write_icons_module(
    assets: list[IconAsset],
    file_path: str | Path,
    types_filename: str | None = "icons.d.ts",
) -> Path:
    path = Path(file_path)
    fmt = path.suffix.lstrip(".") or "ts"
    with path_lock(path):
        atomic_write_text(path, render_icons_module(assets, fmt))
    if types_filename:
        write_declarations([a.name for a in assets], path.with_name(types_filename))
    logger.info("Wrote %d icons to %s", len(assets), path)
    return path


def _find_body_span(text: str, var: str) -> tuple[int, int] | None:
    """(start, end) of the ``body`` template literal content for ``var``."""
    head = re.search(rf"export\s+const\s+{re.escape(var)}\s*=\s*\{{", text)
    if not head:
        return None
    body = _BODY_START_RE.search(text, head.end())
    if not body:
        return None
    i = body.end()
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == "`":
            return body.end(), i
        i += 1
    return None


def update_icons_module(
    name: str,
    markup: str,
    file_path: str | Path,
    types_filename: str | None = "icons.d.ts",
) -> bool:
    """Replace one icon's body in an existing ts/js module; ``False`` if absent."""
    if not name or not markup or not file_path:
        return False
    path = Path(file_path)
    with path_lock(path):
        text = read_text(path)
        if text is None:
            return False
        span = _find_body_span(text, to_variable_name(name))
        if span is None:
            logger.info("Icon %r not found in %s", name, path)
            return False
        body = escape_template_literal(extract_body(clean(markup)))
        new_text = text[: span[0]] + body + text[span[1]:]
        try:
            atomic_write_text(path, new_text)
        except OSError:
            logger.exception("Failed to write %s", path)
            return False
    if types_filename:
        write_declarations(names_from_module(new_text), path.with_name(types_filename))
    return True
