"""Shared generation context and markup rewriting for the target generators."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from iconforge.generators.naming import (
    sanitize_identifier,
    to_camel_case,
    to_component_name,
    to_custom_element_name,
    to_kebab_case,
    to_pascal_case,
)
from iconforge.models.export_options import (
    BodyMode,
    ComponentExportOptions,
    ExportStyle,
    NamingConvention,
)
from iconforge.models.icon import IconAsset
from iconforge.svg.normalizer import clean, extract_body, extract_root_attributes, view_box_or_default
from iconforge.svg.xmltree import ATTR_RE

if TYPE_CHECKING:
    from iconforge.generators.registry import GeneratorSpec

logger = logging.getLogger(__name__)

# Root attributes the generated wrapper owns itself
_WRAPPER_OWNED = {"width", "height", "viewBox", "id", "class", "style", "version", "x", "y",
                  "baseProfile", "enable-background"}

_TAG_RE = re.compile(r"""<(/?)([A-Za-z][\w:.-]*)((?:\s+[^\s=/>]+(?:\s*=\s*(?:"[^"]*"|'[^']*'))?)*)\s*(/?)>""")
_TEXT_RE = re.compile(r">([^<]+)<")
_JSX_ATTR_RENAMES = {
    "class": "className",
    "for": "htmlFor",
    "xlink:href": "xlinkHref",
    "xml:space": "xmlSpace",
    "xml:lang": "xmlLang",
    "xmlns:xlink": "xmlnsXlink",
}


@dataclass
class GenerationContext:
    """Everything a generator needs, derived once from asset + options."""

    asset: IconAsset
    options: ComponentExportOptions
    export_style: ExportStyle
    component_name: str
    element_name: str
    symbol_id: str
    view_box: str
    body: str
    root_attrs: dict[str, str] = field(default_factory=dict)

    @classmethod
    def build(cls, asset: IconAsset, options: ComponentExportOptions, spec: GeneratorSpec) -> GenerationContext:
        cleaned = clean(asset.markup)
        base = options.component_name or asset.name
        return cls(
            asset=asset,
            options=options,
            export_style=spec.resolve_export_style(options),
            component_name=(
                sanitize_identifier(options.component_name)
                if options.component_name
                else to_component_name(asset.name)
            ),
            element_name=to_custom_element_name(base),
            symbol_id=asset.symbol_id,
            view_box=view_box_or_default(cleaned, asset.view_box),
            body=extract_body(cleaned),
            root_attrs=extract_root_attributes(cleaned),
        )

    # ── Options shortcuts ────────────────────────────────────────────

    @property
    def typescript(self) -> bool:
        return self.options.typescript

    @property
    def sprite(self) -> bool:
        return self.options.body_mode == BodyMode.SPRITE

    @property
    def href(self) -> str:
        return f"{self.options.sprite_path}#{self.symbol_id}"

    @property
    def size_literal(self) -> str:
        return js_literal(self.options.default_size)

    @property
    def color_literal(self) -> str:
        return js_string(self.options.default_color)

    @property
    def named(self) -> bool:
        return self.export_style in (ExportStyle.NAMED, ExportStyle.BOTH)

    @property
    def default(self) -> bool:
        return self.export_style in (ExportStyle.DEFAULT, ExportStyle.BOTH)

    def ext(self, ts: str, js: str) -> str:
        return ts if self.typescript else js

    def file_stem(self, default: NamingConvention, element: bool = False) -> str:
        """File stem in the requested convention (``default`` when unset)."""
        convention = self.options.naming or default
        words = self.element_name if element else self.component_name
        if convention == NamingConvention.KEBAB:
            return to_kebab_case(words)
        if convention == NamingConvention.CAMEL:
            return to_camel_case(words)
        return to_pascal_case(words) if element else self.component_name

    # ── Root attributes ──────────────────────────────────────────────

    @property
    def color_targets(self) -> list[str]:
        """Root attributes that receive the ``color`` prop."""
        bound = [k for k in ("fill", "stroke") if k in self.root_attrs
                 and self.root_attrs[k].strip().lower() != "none"]
        if bound:
            return bound
        if self.root_attrs.get("fill", "").strip().lower() == "none":
            return ["stroke"]
        return ["fill"]

    @property
    def static_attrs(self) -> dict[str, str]:
        """Presentation attributes copied verbatim onto the wrapper."""
        bound = set(self.color_targets)
        return {
            k: v
            for k, v in self.root_attrs.items()
            if k not in _WRAPPER_OWNED
            and k not in bound
            and not k.startswith(("xmlns", "xlink:", "xml:", "data-", "sodipodi", "inkscape"))
        }

    def inner_markup(self, escape_braces: bool = True) -> str:
        """``<use>`` reference in sprite mode, else the icon body."""
        if self.sprite:
            return f'<use href="{self.href}" />'
        return escape_text_braces(self.body) if escape_braces else self.body


# ── Literals and escaping ────────────────────────────────────────────────


def js_string(value: str) -> str:
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def js_literal(value: int | float | str) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return js_string(value)


def escape_template_literal(text: str) -> str:
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def escape_attr(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;")


def escape_text_braces(markup: str, extra: dict[str, str] | None = None) -> str:
    """Entity-encode ``{``/``}`` (and ``extra`` characters) in text nodes only."""
    table = {"{": "&#123;", "}": "&#125;"}
    if extra:
        table.update(extra)

    def repl(m: re.Match) -> str:
        text = m.group(1)
        for ch, entity in table.items():
            text = text.replace(ch, entity)
        return f">{text}<"

    return _TEXT_RE.sub(repl, markup)


def render_attrs(attrs: dict[str, str]) -> str:
    return "".join(f' {k}="{escape_attr(v)}"' for k, v in attrs.items())


def indent(text: str, prefix: str) -> str:
    return "\n".join(prefix + line if line.strip() else line for line in text.splitlines())


def pretty_children(markup: str) -> str:
    """One top-level child per line for readable generated code."""
    return re.sub(r">\s*<(?!/)", ">\n<", markup).strip()


# ── JSX ──────────────────────────────────────────────────────────────────


def jsx_attr_name(name: str) -> str:
    if name in _JSX_ATTR_RENAMES:
        return _JSX_ATTR_RENAMES[name]
    if name.startswith(("data-", "aria-")):
        return name
    parts = re.split(r"[-:]", name)
    return parts[0] + "".join(p[:1].upper() + p[1:] for p in parts[1:])


def style_to_object(style: str) -> str:
    """``fill-opacity: .5; color: red`` -> ``{{ fillOpacity: '.5', color: 'red' }}``."""
    entries = []
    for decl in style.split(";"):
        prop, sep, value = decl.partition(":")
        prop, value = prop.strip(), value.strip()
        if not sep or not prop:
            continue
        key = js_string(prop) if prop.startswith("--") else jsx_attr_name(prop)
        entries.append(f"{key}: {js_string(value)}")
    return "{{ " + ", ".join(entries) + " }}" if entries else "{{}}"


def to_jsx(
    markup: str,
    element_names: dict[str, str] | None = None,
    drop_attrs: frozenset[str] = frozenset(),
) -> str:
    """Rewrite SVG markup as JSX: camelCase attributes, style objects, escaped text.

    ``element_names`` maps lowercase tag names to replacement element names
    (react-native-svg); tags absent from the map are left as-is.
    """

    def rewrite(m: re.Match) -> str:
        closing, tag, attr_text, self_closing = m.groups()
        if element_names is not None:
            tag = element_names.get(tag.lower(), tag)
        if closing:
            return f"</{tag}>"
        parts = []
        for am in ATTR_RE.finditer(attr_text):
            name = am.group(1)
            value = am.group(2) if am.group(2) is not None else am.group(3)
            if name in drop_attrs or name.startswith("xmlns"):
                continue
            if name == "style":
                parts.append(f"style={style_to_object(value)}")
            else:
                parts.append(f'{jsx_attr_name(name)}="{escape_attr(value)}"')
        attrs = (" " + " ".join(parts)) if parts else ""
        return f"<{tag}{attrs} />" if self_closing else f"<{tag}{attrs}>"

    return _TAG_RE.sub(rewrite, escape_text_braces(markup))


def export_lines(ctx: GenerationContext, declaration: str, identifier: str | None = None) -> str:
    """Wrap a ``const X = ...`` / ``class X ...`` declaration per export style."""
    head = f"export {declaration}" if ctx.named else declaration
    if ctx.default:
        return f"{head}\n\nexport default {identifier or ctx.component_name};\n"
    return f"{head}\n"
