"""Find references to an icon across source text, files and directory trees."""

from __future__ import annotations

import fnmatch
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable

from iconforge.models.usage import UsageMatch
from iconforge.usage.extract import extract_full_element, extract_inline_svg
from iconforge.usage.patterns import build_patterns, find_matches
from iconforge.utils.files import read_text

logger = logging.getLogger(__name__)

DEFAULT_INCLUDE = (
    "*.ts", "*.tsx", "*.js", "*.jsx", "*.mjs", "*.cjs",
    "*.vue", "*.svelte", "*.astro", "*.html", "*.htm",
    "*.css", "*.scss", "*.less", "*.md", "*.mdx",
)
DEFAULT_EXCLUDE_DIRS = frozenset({"node_modules", "dist", "build", ".git", "coverage"})


def _expanded(text: str, offset: int) -> str | None:
    span = extract_full_element(text, offset) or extract_inline_svg(text, offset)
    return span.text if span is not None else None


def scan_text(text: str, name: str, file: str = "") -> list[UsageMatch]:
    """All references to ``name`` in ``text``; at most one per line, in line order."""
    hits: dict[int, tuple[int, str]] = {}
    for fragment in build_patterns(name).fragments:
        for offset in find_matches(text, fragment):
            line = text.count("\n", 0, offset) + 1
            if line not in hits or offset < hits[line][0]:
                hits[line] = (offset, fragment)

    matches = []
    for line in sorted(hits):
        offset, fragment = hits[line]
        line_start = text.rfind("\n", 0, offset) + 1
        line_end = text.find("\n", offset)
        if line_end == -1:
            line_end = len(text)
        matches.append(
            UsageMatch(
                file=file,
                offset=offset,
                byte_offset=len(text[:offset].encode("utf-8")),
                line=line,
                column=offset - line_start + 1,
                matched_pattern=fragment,
                line_text=text[line_start:line_end].rstrip("\r"),
                expanded_text=_expanded(text, offset),
            )
        )
    return matches


def scan_files(
    paths: Iterable[str | Path],
    name: str,
    max_workers: int | None = None,
    cancelled: Callable[[], bool] | None = None,
) -> list[UsageMatch]:
    """Scan files concurrently; results sorted by file, then line.

    ``cancelled`` is polled before each file; once it returns ``True`` the
    remaining files are skipped.
    """
    paths = [str(p) for p in paths]

    def scan_one(path: str) -> list[UsageMatch]:
        if cancelled is not None and cancelled():
            return []
        text = read_text(path)
        if text is None:
            return []
        return scan_text(text, name, file=path)

    if not paths:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        per_file = list(pool.map(scan_one, paths))
    results = [m for matches in per_file for m in matches]
    results.sort(key=lambda m: (m.file, m.line))
    logger.info("Found %d references to %r in %d files", len(results), name, len(paths))
    return results


def _matches_any(rel_path: str, patterns: Iterable[str]) -> bool:
    base = rel_path.rsplit("/", 1)[-1]
    return any(fnmatch.fnmatch(rel_path, p) or fnmatch.fnmatch(base, p) for p in patterns)


def iter_source_files(
    root: str | Path,
    include: Iterable[str] = DEFAULT_INCLUDE,
    exclude: Iterable[str] = (),
) -> list[Path]:
    """Files under ``root`` matching ``include`` and not ``exclude``, in sorted order."""
    root = Path(root)
    include = tuple(include)
    exclude = tuple(exclude)
    found = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in DEFAULT_EXCLUDE_DIRS)
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            rel = path.relative_to(root).as_posix()
            if _matches_any(rel, include) and not _matches_any(rel, exclude):
                found.append(path)
    return found


def scan_directory(
    root: str | Path,
    name: str,
    include: Iterable[str] = DEFAULT_INCLUDE,
    exclude: Iterable[str] = (),
    max_workers: int | None = None,
    cancelled: Callable[[], bool] | None = None,
) -> list[UsageMatch]:
    files = iter_source_files(root, include, exclude)
    logger.debug("Scanning %d files under %s for %r", len(files), root, name)
    return scan_files(files, name, max_workers=max_workers, cancelled=cancelled)
