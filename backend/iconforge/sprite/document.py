"""Sprite document: one root ``<svg>`` holding uniquely id'd ``<symbol>`` children.

Reading is a span tokenizer over the raw text so that a rewrite can splice a
single symbol and leave every other byte of the file untouched. New symbol
elements are always produced with ElementTree, never by string templating.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from iconforge.svg.xmltree import ROOT_CLOSE_RE, SVG_NS, XLINK_NS, parse_attributes, serialize

logger = logging.getLogger(__name__)

_SYMBOL_OPEN_RE = re.compile(r"""<symbol\b((?:[^>"']|"[^"]*"|'[^']*')*?)(/?)>""", re.IGNORECASE)
_SYMBOL_CLOSE_RE = re.compile(r"</symbol\s*>", re.IGNORECASE)


@dataclass(frozen=True)
class SymbolEntry:
    id: str
    view_box: str | None
    attrs: dict[str, str]
    inner: str
    start: int
    end: int


class SpriteDocument:
    """Ordered symbols of a sprite file, keyed by id."""

    def __init__(self, text: str, symbols: list[SymbolEntry]) -> None:
        self.text = text
        self._symbols = symbols
        self._by_id: dict[str, SymbolEntry] = {}
        for entry in symbols:
            if entry.id in self._by_id:
                logger.warning("Duplicate symbol id %r in sprite; first one wins", entry.id)
                continue
            self._by_id[entry.id] = entry

    @classmethod
    def parse(cls, text: str) -> SpriteDocument:
        symbols: list[SymbolEntry] = []
        pos = 0
        while True:
            m = _SYMBOL_OPEN_RE.search(text, pos)
            if not m:
                break
            attrs = parse_attributes(m.group(1))
            if m.group(2):
                inner, end = "", m.end()
            else:
                close = _SYMBOL_CLOSE_RE.search(text, m.end())
                if not close:
                    logger.warning("Unclosed <symbol> at offset %d", m.start())
                    break
                inner, end = text[m.end(): close.start()], close.end()
            if "id" in attrs:
                symbols.append(
                    SymbolEntry(
                        id=attrs["id"],
                        view_box=attrs.get("viewBox"),
                        attrs=attrs,
                        inner=inner,
                        start=m.start(),
                        end=end,
                    )
                )
            pos = end
        return cls(text, symbols)

    # ── Lookup ───────────────────────────────────────────────────────

    @property
    def ids(self) -> list[str]:
        return list(self._by_id)

    def get(self, symbol_id: str) -> SymbolEntry | None:
        return self._by_id.get(symbol_id)

    def __contains__(self, symbol_id: object) -> bool:
        return symbol_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self):
        return iter(self._by_id.values())

    # ── Splicing (each returns new text; the document is not mutated) ─

    def replace_symbol(self, entry: SymbolEntry, element: str) -> str:
        return self.text[: entry.start] + element + self.text[entry.end:]

    def insert_symbol(self, element: str) -> str:
        closes = list(ROOT_CLOSE_RE.finditer(self.text))
        if not closes:
            raise ValueError("Sprite has no closing </svg> tag")
        at = closes[-1].start()
        before = self.text[:at]
        lead = "" if before.endswith("\n") else "\n"
        return f"{before}{lead}  {element}\n{self.text[at:]}"

    def remove_symbol(self, entry: SymbolEntry) -> str:
        start, end = entry.start, entry.end
        # Take the symbol's own line with it when it sits alone on one
        line_start = self.text.rfind("\n", 0, start) + 1
        if not self.text[line_start:start].strip():
            start = line_start
            if self.text[end: end + 1] == "\n":
                end += 1
        return self.text[:start] + self.text[end:]


def build_symbol(symbol_id: str, view_box: str, body: str, attrs: dict[str, str] | None = None) -> str | None:
    """Serialized ``<symbol>`` element, or ``None`` when ``body`` is not well-formed."""
    try:
        holder = ET.fromstring(f'<symbol xmlns:xlink="{XLINK_NS}">{body}</symbol>')
    except ET.ParseError as e:
        logger.warning("Symbol body for %r is not well-formed: %s", symbol_id, e)
        return None

    merged = dict(attrs or {})
    merged.pop("xmlns", None)
    merged["id"] = symbol_id
    merged["viewBox"] = view_box
    symbol = ET.Element("symbol", {k: v for k, v in merged.items() if not k.startswith("xmlns")})
    symbol.text = holder.text
    for child in holder:
        symbol.append(child)
    return serialize(symbol)


def new_sprite(elements: list[str]) -> str:
    """Fresh sprite text holding ``elements``."""
    lines = "".join(f"  {el}\n" for el in elements)
    return f'<svg xmlns="{SVG_NS}" style="display: none;">\n{lines}</svg>\n'
