"""React Native component on top of react-native-svg.

react-native-svg cannot resolve ``<use>`` against an external sprite file,
so only inline bodies are supported.
"""

from __future__ import annotations

import logging
import re

from iconforge.generators.markup import (
    GenerationContext,
    escape_attr,
    indent,
    jsx_attr_name,
    pretty_children,
    to_jsx,
)
from iconforge.generators.registry import generator
from iconforge.models.export_options import BodyMode, Framework, GeneratedComponent, NamingConvention

logger = logging.getLogger(__name__)

RN_ELEMENTS = {
    name.lower(): name
    for name in (
        "Circle", "ClipPath", "Defs", "Ellipse", "ForeignObject", "G", "Image", "Line",
        "LinearGradient", "Marker", "Mask", "Path", "Pattern", "Polygon", "Polyline",
        "RadialGradient", "Rect", "Stop", "Symbol", "Text", "TextPath", "TSpan", "Use",
    )
}
_UNSUPPORTED_RE = re.compile(
    r"<(style|script|title|desc|filter|animate\w*|set)\b[^>]*?(?:/>|>.*?</\1\s*>)",
    re.DOTALL | re.IGNORECASE,
)
_ELEMENT_RE = re.compile(r"<([A-Z]\w*)")


@generator(
    target=Framework.REACT_NATIVE,
    name="React Native",
    description="react-native-svg component (inline body only)",
    body_modes={BodyMode.INLINE},
)
def generate_react_native(ctx: GenerationContext) -> GeneratedComponent:
    name = ctx.component_name
    props_type = f"{name}Props"

    body = _UNSUPPORTED_RE.sub("", ctx.body)
    if body != ctx.body:
        logger.debug("Dropped elements react-native-svg cannot render from %s", ctx.asset.name)
    children = to_jsx(body, element_names=RN_ELEMENTS, drop_attrs=frozenset({"class"}))
    used = sorted({m.group(1) for m in _ELEMENT_RE.finditer(children)} & set(RN_ELEMENTS.values()))

    named_imports = ", ".join(used)
    imports = f"import Svg, {{ {named_imports} }} from 'react-native-svg';" if used else (
        "import Svg from 'react-native-svg';"
    )
    if ctx.typescript:
        imports += "\nimport type { SvgProps } from 'react-native-svg';"

    sections = [imports]
    if ctx.typescript:
        sections.append(
            f"export interface {props_type} extends SvgProps {{\n"
            "  size?: number | string;\n"
            "  color?: string;\n"
            "}"
        )

    attrs = ["width={size}", "height={size}", f'viewBox="{ctx.view_box}"']
    attrs += [f"{target}={{color}}" for target in ctx.color_targets]
    attrs += [f'{jsx_attr_name(k)}="{escape_attr(v)}"' for k, v in ctx.static_attrs.items()]
    attrs.append("{...props}")
    svg = "\n".join(
        ["<Svg"] + [f"  {a}" for a in attrs] + [">", indent(pretty_children(children), "  "), "</Svg>"]
    )

    params = f"{{ size = {ctx.size_literal}, color = {ctx.color_literal}, ...props }}"
    typed = f"{params}: {props_type}" if ctx.typescript else params
    decl = f"const {name} = ({typed}) => (\n{indent(svg, '  ')}\n);"
    sections.append(f"export {decl}" if ctx.named else decl)
    if ctx.default:
        sections.append(f"export default {name};")

    ext = ctx.ext("tsx", "jsx")
    return GeneratedComponent(
        filename=f"{ctx.file_stem(NamingConvention.PASCAL)}.{ext}",
        language=ext,
        source_text="\n\n".join(sections) + "\n",
    )
