"""React and Preact function components."""

from __future__ import annotations

from iconforge.generators.markup import (
    GenerationContext,
    escape_attr,
    escape_text_braces,
    indent,
    jsx_attr_name,
    pretty_children,
    to_jsx,
)
from iconforge.generators.registry import generator
from iconforge.models.export_options import Framework, GeneratedComponent, NamingConvention


def _svg_element(ctx: GenerationContext, camel_case: bool, with_ref: bool) -> str:
    attrs = []
    if with_ref:
        attrs.append("ref={ref}")
    attrs += ["width={size}", "height={size}", f'viewBox="{ctx.view_box}"']
    attrs += [f"{target}={{color}}" for target in ctx.color_targets]
    for key, value in ctx.static_attrs.items():
        name = jsx_attr_name(key) if camel_case else key
        attrs.append(f'{name}="{escape_attr(value)}"')
    attrs.append("{...props}")

    if ctx.sprite:
        children = ctx.inner_markup()
    elif camel_case:
        children = to_jsx(ctx.body)
    else:
        children = escape_text_braces(ctx.body)

    lines = ["<svg"] + [f"  {a}" for a in attrs] + [">"]
    lines.append(indent(pretty_children(children), "  "))
    lines.append("</svg>")
    return "\n".join(lines)


def _render(ctx: GenerationContext, preact: bool) -> GeneratedComponent:
    opts = ctx.options
    name = ctx.component_name
    props_type = f"{name}Props"
    module = "preact/compat" if preact else "react"

    imports = []
    hooks = [h for h, used in (("forwardRef", opts.forward_ref), ("memo", opts.memo)) if used]
    if hooks:
        imports.append(f"import {{ {', '.join(hooks)} }} from '{module}';")
    if ctx.typescript:
        if preact:
            imports.append("import type { JSX } from 'preact';")
        else:
            imports.append("import type { SVGProps } from 'react';")

    sections = []
    if imports:
        sections.append("\n".join(imports))

    if ctx.typescript:
        base = "JSX.SVGAttributes<SVGSVGElement>" if preact else "SVGProps<SVGSVGElement>"
        sections.append(
            f"export interface {props_type} extends {base} {{\n"
            "  size?: number | string;\n"
            "  color?: string;\n"
            "}"
        )

    params = f"{{ size = {ctx.size_literal}, color = {ctx.color_literal}, ...props }}"
    svg = _svg_element(ctx, camel_case=not preact, with_ref=opts.forward_ref)

    if opts.forward_ref:
        generic = f"<SVGSVGElement, {props_type}>" if ctx.typescript else ""
        expr = f"forwardRef{generic}(\n  ({params}, ref) => (\n{indent(svg, '    ')}\n  ),\n)"
    else:
        typed = f"{params}: {props_type}" if ctx.typescript else params
        expr = f"({typed}) => (\n{indent(svg, '  ')}\n)"
    if opts.memo:
        expr = f"memo({expr})"

    decl = f"const {name} = {expr};"
    sections.append(f"export {decl}" if ctx.named else decl)
    if opts.forward_ref or opts.memo:
        sections.append(f"{name}.displayName = '{name}';")
    if ctx.default:
        sections.append(f"export default {name};")

    stem = ctx.file_stem(NamingConvention.PASCAL)
    ext = ctx.ext("tsx", "jsx")
    return GeneratedComponent(
        filename=f"{stem}.{ext}",
        language=ext,
        source_text="\n\n".join(sections) + "\n",
    )


@generator(
    target=Framework.REACT,
    name="React",
    description="Function component with SVG prop passthrough",
    forward_ref=True,
    memo=True,
)
def generate_react(ctx: GenerationContext) -> GeneratedComponent:
    return _render(ctx, preact=False)


@generator(
    target=Framework.PREACT,
    name="Preact",
    description="Function component; wrappers come from preact/compat",
    forward_ref=True,
    memo=True,
)
def generate_preact(ctx: GenerationContext) -> GeneratedComponent:
    return _render(ctx, preact=True)
