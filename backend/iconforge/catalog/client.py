"""Iconify-style catalog data shapes and aggregated search.

Only URLs and payloads are modelled here. Fetching is done by the caller's
``sources``: plain callables ``query -> list[CatalogIcon]``.
"""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Mapping
from urllib.parse import quote

from iconforge.catalog.cache import TTLCache
from iconforge.errors import UnknownCollectionError
from iconforge.models.catalog import CatalogIcon, CollectionInfo

logger = logging.getLogger(__name__)

API_BASE = "https://api.iconify.design"

_PREFIX_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

KNOWN_COLLECTIONS: dict[str, CollectionInfo] = {
    c.id: c
    for c in (
        CollectionInfo(id="lucide", name="Lucide Icons", license="ISC", website="https://lucide.dev", style="outline"),
        CollectionInfo(id="heroicons", name="Heroicons", license="MIT", website="https://heroicons.com"),
        CollectionInfo(id="tabler", name="Tabler Icons", license="MIT", website="https://tabler-icons.io", style="outline"),
        CollectionInfo(id="bi", name="Bootstrap Icons", license="MIT", website="https://icons.getbootstrap.com"),
        CollectionInfo(id="mdi", name="Material Design Icons", license="Apache-2.0", website="https://pictogrammers.com"),
        CollectionInfo(id="material-symbols", name="Material Symbols", license="Apache-2.0", website="https://fonts.google.com/icons"),
        CollectionInfo(id="ph", name="Phosphor Icons", license="MIT", website="https://phosphoricons.com"),
    )
}

Source = Callable[[str], list[CatalogIcon]]


def parse_search_results(data: Any) -> list[CatalogIcon]:
    """``{"icons": ["mdi:home", ...]}`` -> records; malformed ids are skipped."""
    if not isinstance(data, dict) or not isinstance(data.get("icons"), list):
        return []
    icons = []
    for icon_id in data["icons"]:
        if not isinstance(icon_id, str):
            continue
        parts = icon_id.split(":")
        if len(parts) == 2 and parts[0] and parts[1]:
            icons.append(CatalogIcon(prefix=parts[0], name=parts[1]))
    return icons


def build_search_url(query: str, limit: int = 50) -> str:
    return f"{API_BASE}/search?query={quote(query, safe='')}&limit={limit}"


def build_svg_url(prefix: str, name: str, color: str | None = None) -> str:
    url = f"{API_BASE}/{prefix}/{name}.svg"
    if color:
        url += f"?color={quote(color, safe='')}"
    return url


def is_valid_svg_response(data: str, status_code: int) -> bool:
    return status_code == 200 and "<svg" in data


def resolve_collection(prefix: str, known: Mapping[str, CollectionInfo] | None = None) -> CollectionInfo:
    """Metadata for ``prefix``; unknown or malformed prefixes raise."""
    known = KNOWN_COLLECTIONS if known is None else known
    if not prefix or not _PREFIX_RE.match(prefix):
        raise UnknownCollectionError(f"Invalid collection prefix: {prefix!r}")
    info = known.get(prefix)
    if info is None:
        raise UnknownCollectionError(f"Unknown collection: {prefix!r}. Known: {', '.join(sorted(known))}")
    return info


def aggregated_search(
    query: str,
    sources: Mapping[str, Source],
    cache: TTLCache | None = None,
    max_workers: int | None = None,
) -> dict[str, list[CatalogIcon]]:
    """Run ``query`` against every source concurrently.

    A failing source contributes ``[]`` and does not affect the others.
    Result keys follow the order of ``sources``.
    """
    names = list(sources)

    def run(source_name: str) -> list[CatalogIcon]:
        key = f"{source_name}:{query}"
        if cache is not None:
            hit = cache.get(key)
            if hit is not None:
                return hit
        try:
            icons = list(sources[source_name](query))
        except Exception as e:
            logger.warning("Catalog source %r failed for %r: %s", source_name, query, e)
            return []
        if cache is not None:
            cache.set(key, icons)
        return icons

    if not names:
        return {}
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        results = list(pool.map(run, names))
    return dict(zip(names, results))
