"""Generator registry: one generator function per ``Framework`` member.

Usage:
    @generator(target=Framework.SVELTE, name="Svelte", export_styles={ExportStyle.DEFAULT})
    def generate_svelte(ctx: GenerationContext) -> GeneratedComponent:
        ...

Adding a target = adding an enum member and one module with the decorator.
``check_registry`` fails loudly when a member has no generator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from iconforge.errors import UnsupportedOptionError, UnsupportedTargetError
from iconforge.models.export_options import (
    BodyMode,
    ComponentExportOptions,
    ExportStyle,
    Framework,
    GeneratedComponent,
)

if TYPE_CHECKING:
    from iconforge.generators.markup import GenerationContext

logger = logging.getLogger(__name__)

ALL_EXPORT_STYLES = frozenset(ExportStyle)


@dataclass
class GeneratorSpec:
    target: Framework
    fn: Callable[["GenerationContext"], GeneratedComponent]
    name: str
    description: str = ""
    export_styles: frozenset[ExportStyle] = ALL_EXPORT_STYLES
    default_export: ExportStyle = ExportStyle.NAMED
    forward_ref: bool = False
    memo: bool = False
    body_modes: frozenset[BodyMode] = field(default_factory=lambda: frozenset(BodyMode))

    def resolve_export_style(self, options: ComponentExportOptions) -> ExportStyle:
        return options.export_style or self.default_export

    def check(self, options: ComponentExportOptions) -> None:
        """Reject wrapper options this target cannot honour."""
        label = self.target.value
        style = self.resolve_export_style(options)
        if style not in self.export_styles:
            raise UnsupportedOptionError(f"{label} does not support export style '{style.value}'")
        if options.forward_ref and not self.forward_ref:
            raise UnsupportedOptionError(f"{label} does not support ref forwarding")
        if options.memo and not self.memo:
            raise UnsupportedOptionError(f"{label} does not support memoization")
        if options.body_mode not in self.body_modes:
            raise UnsupportedOptionError(f"{label} does not support {options.body_mode.value} body mode")


class GeneratorRegistry:
    """Lookup table from framework to generator."""

    def __init__(self) -> None:
        self._generators: dict[Framework, GeneratorSpec] = {}

    def register(self, spec: GeneratorSpec) -> None:
        if spec.target in self._generators:
            raise ValueError(f"Duplicate generator for target: {spec.target.value}")
        self._generators[spec.target] = spec
        logger.debug("Registered generator %s", spec.target.value)

    def get(self, target: Framework | str) -> GeneratorSpec:
        framework = resolve_target(target)
        try:
            return self._generators[framework]
        except KeyError:
            raise UnsupportedTargetError(f"No generator registered for '{framework.value}'") from None

    def all(self) -> list[GeneratorSpec]:
        """Generators in ``Framework`` declaration order."""
        return [self._generators[f] for f in Framework if f in self._generators]

    def missing(self) -> list[Framework]:
        return [f for f in Framework if f not in self._generators]

    def __contains__(self, target: object) -> bool:
        return target in self._generators

    @property
    def count(self) -> int:
        return len(self._generators)


def resolve_target(target: Framework | str) -> Framework:
    """Framework member for an enum value or its string id."""
    if isinstance(target, Framework):
        return target
    try:
        return Framework(str(target).strip().lower())
    except ValueError:
        supported = ", ".join(f.value for f in Framework)
        raise UnsupportedTargetError(f"Unsupported target '{target}'. Supported: {supported}") from None


# Module-level singleton
_registry = GeneratorRegistry()


def get_registry() -> GeneratorRegistry:
    return _registry


def check_registry(registry: GeneratorRegistry | None = None) -> None:
    """Raise if any ``Framework`` member lacks a generator."""
    missing = (registry or _registry).missing()
    if missing:
        raise RuntimeError("Missing generators for: " + ", ".join(f.value for f in missing))


def generator(
    *,
    target: Framework,
    name: str,
    description: str = "",
    export_styles: set[ExportStyle] | frozenset[ExportStyle] = ALL_EXPORT_STYLES,
    default_export: ExportStyle | None = None,
    forward_ref: bool = False,
    memo: bool = False,
    body_modes: set[BodyMode] | None = None,
):
    """Decorator to register a generator function."""

    styles = frozenset(export_styles)
    if default_export is None:
        default_export = ExportStyle.NAMED if ExportStyle.NAMED in styles else next(iter(styles))

    def decorator(fn: Callable[["GenerationContext"], GeneratedComponent]):
        spec = GeneratorSpec(
            target=target,
            fn=fn,
            name=name,
            description=description,
            export_styles=styles,
            default_export=default_export,
            forward_ref=forward_ref,
            memo=memo,
            body_modes=frozenset(body_modes or BodyMode),
        )
        _registry.register(spec)
        return fn

    return decorator
