"""Svelte component."""

from __future__ import annotations

from iconforge.generators.markup import (
    GenerationContext,
    escape_attr,
    escape_text_braces,
    indent,
    pretty_children,
)
from iconforge.generators.registry import generator
from iconforge.models.export_options import ExportStyle, Framework, GeneratedComponent, NamingConvention


@generator(
    target=Framework.SVELTE,
    name="Svelte",
    description="Svelte component with rest-prop passthrough",
    export_styles={ExportStyle.DEFAULT},
)
def generate_svelte(ctx: GenerationContext) -> GeneratedComponent:
    if ctx.typescript:
        script = (
            '<script lang="ts">\n'
            "  import type { SVGAttributes } from 'svelte/elements';\n\n"
            "  interface $$Props extends SVGAttributes<SVGSVGElement> {\n"
            "    size?: number | string;\n"
            "    color?: string;\n"
            "  }\n\n"
            f"  export let size: number | string = {ctx.size_literal};\n"
            f"  export let color: string = {ctx.color_literal};\n"
            "</script>"
        )
    else:
        script = (
            "<script>\n"
            f"  export let size = {ctx.size_literal};\n"
            f"  export let color = {ctx.color_literal};\n"
            "</script>"
        )

    attrs = ["width={size}", "height={size}", f'viewBox="{ctx.view_box}"']
    attrs += [f"{t}={{color}}" for t in ctx.color_targets]
    attrs += [f'{k}="{escape_attr(v)}"' for k, v in ctx.static_attrs.items()]
    attrs.append("{...$$restProps}")
    children = ctx.inner_markup() if ctx.sprite else escape_text_braces(ctx.body)

    source = (
        f"<!-- @component {ctx.component_name} -->\n"
        f"{script}\n\n"
        "<svg\n"
        + "\n".join(f"  {a}" for a in attrs)
        + "\n>\n"
        f"{indent(pretty_children(children), '  ')}\n"
        "</svg>\n"
    )
    return GeneratedComponent(
        filename=f"{ctx.file_stem(NamingConvention.PASCAL)}.svelte",
        language="svelte",
        source_text=source,
    )
