"""Astro component."""

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
    target=Framework.ASTRO,
    name="Astro",
    description="Server-rendered .astro component",
    export_styles={ExportStyle.DEFAULT},
)
def generate_astro(ctx: GenerationContext) -> GeneratedComponent:
    lines = [f"// {ctx.component_name} icon"]
    if ctx.typescript:
        lines += [
            "import type { HTMLAttributes } from 'astro/types';",
            "",
            "interface Props extends HTMLAttributes<'svg'> {",
            "  size?: number | string;",
            "  color?: string;",
            "}",
            "",
        ]
    lines.append(
        f"const {{ size = {ctx.size_literal}, color = {ctx.color_literal}, ...rest }} = Astro.props;"
    )
    frontmatter = "---\n" + "\n".join(lines) + "\n---"

    attrs = ["width={size}", "height={size}", f'viewBox="{ctx.view_box}"']
    attrs += [f"{t}={{color}}" for t in ctx.color_targets]
    attrs += [f'{k}="{escape_attr(v)}"' for k, v in ctx.static_attrs.items()]
    attrs.append("{...rest}")
    children = ctx.inner_markup() if ctx.sprite else escape_text_braces(ctx.body)
    svg = "\n".join(
        ["<svg"] + [f"  {a}" for a in attrs] + [">", indent(pretty_children(children), "  "), "</svg>"]
    )

    return GeneratedComponent(
        filename=f"{ctx.file_stem(NamingConvention.PASCAL)}.astro",
        language="astro",
        source_text=f"{frontmatter}\n\n{svg}\n",
    )
