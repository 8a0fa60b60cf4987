"""Multi-framework component generation.

``generate`` is pure: the same asset and options always produce
byte-identical source text, so batches can run in parallel.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from iconforge.generators.markup import GenerationContext
from iconforge.generators.registry import check_registry, generator, get_registry, resolve_target
from iconforge.models.export_options import ComponentExportOptions, GeneratedComponent
from iconforge.models.icon import IconAsset

# Importing the target modules registers their generators
from iconforge.generators import angular, astro, react, react_native, solid, svelte, vue, web_components  # noqa: E402,F401

logger = logging.getLogger(__name__)

check_registry()


def generate(asset: IconAsset, options: ComponentExportOptions | None = None) -> GeneratedComponent:
    """Source text for one icon in the requested target framework."""
    options = options or ComponentExportOptions()
    spec = get_registry().get(options.target)
    spec.check(options)
    ctx = GenerationContext.build(asset, options, spec)
    return spec.fn(ctx)


def generate_batch(
    assets: list[IconAsset],
    options: ComponentExportOptions | None = None,
    max_workers: int | None = None,
) -> list[GeneratedComponent]:
    """Generate many icons concurrently; output order follows ``assets``.

    ``component_name`` only makes sense for a single icon and is ignored.
    """
    options = (options or ComponentExportOptions()).model_copy(update={"component_name": None})
    # Fail before fanning out
    get_registry().get(options.target).check(options)
    if not assets:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        results = list(pool.map(lambda asset: generate(asset, options), assets))
    logger.info("Generated %d %s components", len(results), options.target.value)
    return results


def available_targets() -> list[dict]:
    return [
        {
            "id": spec.target.value,
            "name": spec.name,
            "description": spec.description,
            "export_styles": sorted(s.value for s in spec.export_styles),
            "forward_ref": spec.forward_ref,
            "memo": spec.memo,
            "body_modes": sorted(m.value for m in spec.body_modes),
        }
        for spec in get_registry().all()
    ]


__all__ = [
    "generate",
    "generate_batch",
    "available_targets",
    "check_registry",
    "generator",
    "get_registry",
    "resolve_target",
    "GenerationContext",
]
