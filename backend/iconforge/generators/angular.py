"""Angular standalone component.

Angular sources are always TypeScript; the ``typescript`` flag only adds the
exported props interface.
"""

from __future__ import annotations

from iconforge.generators.markup import (
    GenerationContext,
    escape_attr,
    escape_template_literal,
    escape_text_braces,
    indent,
    pretty_children,
)
from iconforge.generators.registry import generator
from iconforge.models.export_options import ExportStyle, Framework, GeneratedComponent, NamingConvention


@generator(
    target=Framework.ANGULAR,
    name="Angular",
    description="Standalone OnPush component with size/color inputs",
    export_styles={ExportStyle.NAMED},
)
def generate_angular(ctx: GenerationContext) -> GeneratedComponent:
    class_name = f"{ctx.component_name}IconComponent"

    attrs = ['[attr.width]="size"', '[attr.height]="size"', f'viewBox="{ctx.view_box}"']
    attrs += [f'[attr.{t}]="color"' for t in ctx.color_targets]
    attrs += [f'{k}="{escape_attr(v)}"' for k, v in ctx.static_attrs.items()]
    # "@" opens control-flow blocks in Angular templates
    children = ctx.inner_markup() if ctx.sprite else escape_text_braces(ctx.body, {"@": "&#64;"})
    template = (
        f"<svg {' '.join(attrs)}>\n"
        f"{indent(pretty_children(children), '  ')}\n"
        "</svg>"
    )

    sections = ["import { ChangeDetectionStrategy, Component, Input } from '@angular/core';"]
    if ctx.typescript:
        sections.append(
            f"export interface {ctx.component_name}IconProps {{\n"
            "  size?: number | string;\n"
            "  color?: string;\n"
            "}"
        )
    sections.append(
        "@Component({\n"
        f"  selector: '{ctx.element_name}',\n"
        "  standalone: true,\n"
        "  changeDetection: ChangeDetectionStrategy.OnPush,\n"
        "  template: `\n"
        f"{indent(escape_template_literal(template), '    ')}\n"
        "  `,\n"
        "})\n"
        f"export class {class_name} {{\n"
        f"  @Input() size: number | string = {ctx.size_literal};\n"
        f"  @Input() color: string = {ctx.color_literal};\n"
        "}"
    )

    stem = ctx.file_stem(NamingConvention.KEBAB, element=True)
    return GeneratedComponent(
        filename=f"{stem}.component.ts",
        language="ts",
        source_text="\n\n".join(sections) + "\n",
    )
