"""SolidJS and Qwik components.

Both keep plain SVG attribute names (``class``, ``stroke-width``), so the
body is copied as markup with only text braces escaped.
"""

from __future__ import annotations

from iconforge.generators.markup import (
    GenerationContext,
    escape_attr,
    escape_text_braces,
    indent,
    pretty_children,
)
from iconforge.generators.registry import generator
from iconforge.models.export_options import Framework, GeneratedComponent, NamingConvention


def _svg(ctx: GenerationContext, size: str, color: str, spread: str) -> str:
    attrs = [f"width={{{size}}}", f"height={{{size}}}", f'viewBox="{ctx.view_box}"']
    attrs += [f"{t}={{{color}}}" for t in ctx.color_targets]
    attrs += [f'{k}="{escape_attr(v)}"' for k, v in ctx.static_attrs.items()]
    attrs.append(f"{{...{spread}}}")
    children = ctx.inner_markup() if ctx.sprite else escape_text_braces(ctx.body)
    return "\n".join(
        ["<svg"] + [f"  {a}" for a in attrs] + [">", indent(pretty_children(children), "  "), "</svg>"]
    )


def _finish(ctx: GenerationContext, sections: list[str], decl: str) -> GeneratedComponent:
    sections.append(f"export {decl}" if ctx.named else decl)
    if ctx.default:
        sections.append(f"export default {ctx.component_name};")
    ext = ctx.ext("tsx", "jsx")
    return GeneratedComponent(
        filename=f"{ctx.file_stem(NamingConvention.PASCAL)}.{ext}",
        language=ext,
        source_text="\n\n".join(sections) + "\n",
    )


@generator(
    target=Framework.SOLID,
    name="SolidJS",
    description="Component using splitProps to keep reactivity",
)
def generate_solid(ctx: GenerationContext) -> GeneratedComponent:
    name = ctx.component_name
    sections = []
    imports = ["import { splitProps } from 'solid-js';"]
    if ctx.typescript:
        imports.append("import type { JSX } from 'solid-js';")
        sections.append("\n".join(imports))
        sections.append(
            f"export interface {name}Props extends JSX.SvgSVGAttributes<SVGSVGElement> {{\n"
            "  size?: number | string;\n"
            "  color?: string;\n"
            "}"
        )
    else:
        sections.append("\n".join(imports))

    svg = _svg(ctx, f"local.size ?? {ctx.size_literal}", f"local.color ?? {ctx.color_literal}", "others")
    param = f"props: {name}Props" if ctx.typescript else "props"
    decl = (
        f"const {name} = ({param}) => {{\n"
        "  const [local, others] = splitProps(props, ['size', 'color']);\n"
        f"  return (\n{indent(svg, '    ')}\n  );\n"
        "};"
    )
    return _finish(ctx, sections, decl)


@generator(
    target=Framework.QWIK,
    name="Qwik",
    description="component$ with resumable props",
)
def generate_qwik(ctx: GenerationContext) -> GeneratedComponent:
    name = ctx.component_name
    sections = []
    if ctx.typescript:
        sections.append(
            "import { component$ } from '@builder.io/qwik';\n"
            "import type { QwikIntrinsicElements } from '@builder.io/qwik';"
        )
        sections.append(
            f"export type {name}Props = QwikIntrinsicElements['svg'] & {{\n"
            "  size?: number | string;\n"
            "  color?: string;\n"
            "};"
        )
        generic = f"<{name}Props>"
    else:
        sections.append("import { component$ } from '@builder.io/qwik';")
        generic = ""

    svg = _svg(ctx, "size", "color", "props")
    decl = (
        f"const {name} = component${generic}(({{ size = {ctx.size_literal}, "
        f"color = {ctx.color_literal}, ...props }}) => {{\n"
        f"  return (\n{indent(svg, '    ')}\n  );\n"
        "});"
    )
    return _finish(ctx, sections, decl)
