"""Vue 3 components: render-function module and single-file component."""

from __future__ import annotations

from iconforge.generators.markup import (
    GenerationContext,
    escape_attr,
    escape_text_braces,
    indent,
    js_string,
    pretty_children,
)
from iconforge.generators.registry import generator
from iconforge.models.export_options import ExportStyle, Framework, GeneratedComponent, NamingConvention


def _props_interface(ctx: GenerationContext, exported: bool) -> str:
    keyword = "export interface" if exported else "interface"
    return (
        f"{keyword} {ctx.component_name}Props {{\n"
        "  size?: number | string;\n"
        "  color?: string;\n"
        "}"
    )


@generator(
    target=Framework.VUE,
    name="Vue",
    description="defineComponent with a render function",
    export_styles={ExportStyle.DEFAULT},
)
def generate_vue(ctx: GenerationContext) -> GeneratedComponent:
    name = ctx.component_name
    imports = ["import { defineComponent, h } from 'vue';"]
    if ctx.typescript:
        imports.append("import type { PropType } from 'vue';")

    size_type = "[Number, String] as PropType<number | string>" if ctx.typescript else "[Number, String]"
    color_bindings = ", ".join(f"{t}: props.color" for t in ctx.color_targets)
    static = "".join(f", {js_string(k)}: {js_string(v)}" for k, v in ctx.static_attrs.items())
    svg_props = (
        f"width: props.size, height: props.size, viewBox: {js_string(ctx.view_box)}, "
        f"{color_bindings}{static}"
    )

    if ctx.sprite:
        render = (
            f"h('svg', {{ {svg_props}, ...attrs }}, [\n"
            f"  h('use', {{ href: {js_string(ctx.href)} }}),\n"
            "])"
        )
    else:
        render = f"h('svg', {{ {svg_props}, ...attrs, innerHTML: {js_string(ctx.body)} }})"

    sections = ["\n".join(imports)]
    if ctx.typescript:
        sections.append(_props_interface(ctx, exported=True))
    sections.append(
        "export default defineComponent({\n"
        f"  name: '{name}',\n"
        "  inheritAttrs: false,\n"
        "  props: {\n"
        f"    size: {{ type: {size_type}, default: {ctx.size_literal} }},\n"
        f"    color: {{ type: String, default: {ctx.color_literal} }},\n"
        "  },\n"
        "  setup(props, { attrs }) {\n"
        f"    return () =>\n{indent(render, '      ')};\n"
        "  },\n"
        "});"
    )

    ext = ctx.ext("ts", "js")
    return GeneratedComponent(
        filename=f"{ctx.file_stem(NamingConvention.PASCAL)}.{ext}",
        language=ext,
        source_text="\n\n".join(sections) + "\n",
    )


@generator(
    target=Framework.VUE_SFC,
    name="Vue SFC",
    description="Single-file component with <script setup>",
    export_styles={ExportStyle.DEFAULT},
)
def generate_vue_sfc(ctx: GenerationContext) -> GeneratedComponent:
    name = ctx.component_name
    if ctx.typescript:
        script = (
            '<script setup lang="ts">\n'
            f"defineOptions({{ name: '{name}' }});\n\n"
            f"{_props_interface(ctx, exported=False)}\n\n"
            f"withDefaults(defineProps<{name}Props>(), {{\n"
            f"  size: {ctx.size_literal},\n"
            f"  color: {ctx.color_literal},\n"
            "});\n"
            "</script>"
        )
    else:
        script = (
            "<script setup>\n"
            f"defineOptions({{ name: '{name}' }});\n\n"
            "defineProps({\n"
            f"  size: {{ type: [Number, String], default: {ctx.size_literal} }},\n"
            f"  color: {{ type: String, default: {ctx.color_literal} }},\n"
            "});\n"
            "</script>"
        )

    attrs = [':width="size"', ':height="size"', f'viewBox="{ctx.view_box}"']
    attrs += [f':{t}="color"' for t in ctx.color_targets]
    attrs += [f'{k}="{escape_attr(v)}"' for k, v in ctx.static_attrs.items()]
    children = ctx.inner_markup() if ctx.sprite else escape_text_braces(ctx.body)
    template = (
        "<template>\n"
        f"  <svg {' '.join(attrs)}>\n"
        f"{indent(pretty_children(children), '    ')}\n"
        "  </svg>\n"
        "</template>"
    )

    return GeneratedComponent(
        filename=f"{ctx.file_stem(NamingConvention.PASCAL)}.vue",
        language="vue",
        source_text=f"{script}\n\n{template}\n",
    )
