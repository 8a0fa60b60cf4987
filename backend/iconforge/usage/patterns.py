"""Literal search patterns for references to one icon."""

from __future__ import annotations

from iconforge.generators.naming import to_pascal_case
from iconforge.models.usage import UsagePattern


def build_patterns(name: str) -> UsagePattern:
    """Every literal form a source file uses to point at ``name``.

    >>> "<ArrowLeft" in build_patterns("arrow-left")
    True
    """
    return UsagePattern(
        name=name,
        filename=f"{name}.svg",
        double_quoted=f'"{name}"',
        single_quoted=f"'{name}'",
        backtick_quoted=f"`{name}`",
        class_form=f"icon-{name}",
        namespaced=f"icon:{name}",
        opening_tag=f"<{to_pascal_case(name)}",
    )


def find_matches(text: str, pattern: str) -> list[int]:
    """Offsets of every non-overlapping occurrence of ``pattern``."""
    if not pattern:
        return []
    offsets = []
    i = text.find(pattern)
    while i != -1:
        offsets.append(i)
        i = text.find(pattern, i + len(pattern))
    return offsets
