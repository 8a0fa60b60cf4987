"""Custom elements: Lit and framework-free web components."""

from __future__ import annotations

from iconforge.generators.markup import (
    GenerationContext,
    escape_attr,
    escape_template_literal,
    indent,
    js_string,
    pretty_children,
)
from iconforge.generators.registry import generator
from iconforge.models.export_options import Framework, GeneratedComponent, NamingConvention


def _class_name(ctx: GenerationContext) -> str:
    return f"{ctx.component_name}Icon"


def _children(ctx: GenerationContext) -> str:
    return escape_template_literal(pretty_children(ctx.inner_markup(escape_braces=False)))


def _export(ctx: GenerationContext, sections: list[str], declaration: str) -> None:
    class_name = _class_name(ctx)
    sections.append(f"export {declaration}" if ctx.named else declaration)
    if ctx.default:
        sections.append(f"export default {class_name};")


def _result(ctx: GenerationContext, sections: list[str]) -> GeneratedComponent:
    ext = ctx.ext("ts", "js")
    return GeneratedComponent(
        filename=f"{ctx.file_stem(NamingConvention.KEBAB, element=True)}.{ext}",
        language=ext,
        source_text="\n\n".join(sections) + "\n",
    )


@generator(
    target=Framework.LIT,
    name="Lit",
    description="LitElement with reactive size/color properties",
)
def generate_lit(ctx: GenerationContext) -> GeneratedComponent:
    class_name = _class_name(ctx)
    tag = ctx.element_name
    static = "".join(f' {k}="{escape_attr(v)}"' for k, v in ctx.static_attrs.items())
    colors = "".join(f" {t}=${{this.color}}" for t in ctx.color_targets)
    render = (
        "render() {\n"
        "  return html`\n"
        f'    <svg width=${{this.size}} height=${{this.size}} viewBox="{ctx.view_box}"{colors}{static}>\n'
        f"{indent(_children(ctx), '      ')}\n"
        "    </svg>\n"
        "  `;\n"
        "}"
    )

    if ctx.typescript:
        sections = [
            "import { LitElement, css, html } from 'lit';\n"
            "import { customElement, property } from 'lit/decorators.js';",
            f"export interface {class_name}Props {{\n"
            "  size?: number | string;\n"
            "  color?: string;\n"
            "}",
        ]
        body = (
            "static styles = css`:host { display: inline-flex; }`;\n\n"
            f"@property() size: number | string = {ctx.size_literal};\n"
            f"@property() color = {ctx.color_literal};\n\n"
            f"{render}"
        )
        keyword = "export class" if ctx.named else "class"
        sections.append(
            f"@customElement('{tag}')\n{keyword} {class_name} extends LitElement {{\n{indent(body, '  ')}\n}}"
        )
        if ctx.default:
            sections.append(f"export default {class_name};")
        sections.append(
            "declare global {\n"
            "  interface HTMLElementTagNameMap {\n"
            f"    '{tag}': {class_name};\n"
            "  }\n"
            "}"
        )
    else:
        sections = ["import { LitElement, css, html } from 'lit';"]
        body = (
            "static styles = css`:host { display: inline-flex; }`;\n\n"
            "static properties = {\n"
            "  size: {},\n"
            "  color: {},\n"
            "};\n\n"
            "constructor() {\n"
            "  super();\n"
            f"  this.size = {ctx.size_literal};\n"
            f"  this.color = {ctx.color_literal};\n"
            "}\n\n"
            f"{render}"
        )
        _export(ctx, sections, f"class {class_name} extends LitElement {{\n{indent(body, '  ')}\n}}")
        sections.append(f"customElements.define('{tag}', {class_name});")
    return _result(ctx, sections)


@generator(
    target=Framework.WEB_COMPONENT,
    name="Web Component",
    description="Dependency-free custom element with a shadow root",
)
def generate_web_component(ctx: GenerationContext) -> GeneratedComponent:
    class_name = _class_name(ctx)
    tag = ctx.element_name
    static = "".join(f' {k}="{escape_attr(v)}"' for k, v in ctx.static_attrs.items())
    template = f'<svg viewBox="{ctx.view_box}"{static}>\n{indent(_children(ctx), "  ")}\n</svg>'

    sections = []
    if ctx.typescript:
        sections.append(
            f"export interface {class_name}Attributes {{\n"
            "  size?: number | string;\n"
            "  color?: string;\n"
            "}"
        )
    sections.append(
        "const template = `\n"
        "<style>:host { display: inline-flex; }</style>\n"
        f"{template}\n"
        "`;"
    )

    private = "private " if ctx.typescript else ""
    ret = ": void" if ctx.typescript else ""
    svg_lookup = (
        "this.shadowRoot?.querySelector('svg')"
        if not ctx.typescript
        else "this.shadowRoot?.querySelector<SVGSVGElement>('svg')"
    )
    color_lines = "\n".join(f"svg.setAttribute('{t}', color);" for t in ctx.color_targets)
    body = (
        "static get observedAttributes() {\n"
        "  return ['size', 'color'];\n"
        "}\n\n"
        "constructor() {\n"
        "  super();\n"
        "  this.attachShadow({ mode: 'open' }).innerHTML = template;\n"
        "}\n\n"
        f"connectedCallback(){ret} {{\n"
        "  this.update();\n"
        "}\n\n"
        f"attributeChangedCallback(){ret} {{\n"
        "  this.update();\n"
        "}\n\n"
        f"{private}update(){ret} {{\n"
        f"  const svg = {svg_lookup};\n"
        "  if (!svg) return;\n"
        f"  const size = this.getAttribute('size') ?? {js_string(str(ctx.options.default_size))};\n"
        f"  const color = this.getAttribute('color') ?? {ctx.color_literal};\n"
        "  svg.setAttribute('width', size);\n"
        "  svg.setAttribute('height', size);\n"
        f"{indent(color_lines, '  ')}\n"
        "}"
    )
    _export(ctx, sections, f"class {class_name} extends HTMLElement {{\n{indent(body, '  ')}\n}}")
    sections.append(
        f"if (!customElements.get('{tag}')) {{\n"
        f"  customElements.define('{tag}', {class_name});\n"
        "}"
    )
    return _result(ctx, sections)
