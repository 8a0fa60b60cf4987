"""Sprite persistence: targeted, non-destructive symbol updates on disk.

Every mutation holds the sprite's path lock for the whole read-modify-write
cycle, rewrites only the affected symbol span, checks that the result is
still well-formed XML and replaces the file atomically. Failures come back
as :class:`SpriteUpdateStatus` values, never as exceptions.
"""

from __future__ import annotations

import enum
import logging
import re
from pathlib import Path

from iconforge.models.icon import IconAsset
from iconforge.sprite.document import SpriteDocument, build_symbol, new_sprite
from iconforge.sprite.locks import path_lock
from iconforge.sprite.types_file import regenerate_from_sprite
from iconforge.svg.normalizer import clean, extract_body, view_box_or_default
from iconforge.svg.xmltree import find_root_tag, parse_attributes, try_parse
from iconforge.utils.files import atomic_write_text, read_text

logger = logging.getLogger(__name__)

DEFAULT_TYPES_FILENAME = "icons.d.ts"

_ID_SANITIZE_RE = re.compile(r"[^A-Za-z0-9-]")


class SpriteUpdateStatus(str, enum.Enum):
    UPDATED = "updated"
    ADDED = "added"
    REMOVED = "removed"
    INVALID_INPUT = "invalid_input"
    FILE_MISSING = "file_missing"
    SYMBOL_MISSING = "symbol_missing"
    MALFORMED_RESULT = "malformed_result"
    WRITE_FAILED = "write_failed"

    @property
    def ok(self) -> bool:
        return self in (SpriteUpdateStatus.UPDATED, SpriteUpdateStatus.ADDED, SpriteUpdateStatus.REMOVED)


def ensure_id(markup: str, name: str, prefix: str = "ic-") -> str:
    """Keep an existing root id; otherwise inject ``<prefix><sanitized name>``."""
    tag = find_root_tag(markup or "")
    if tag is None:
        return markup
    if "id" in parse_attributes(tag.group(0)[4:]):
        return markup
    new_id = prefix + _ID_SANITIZE_RE.sub("-", name)
    at = tag.start() + len("<svg")
    return f'{markup[:at]} id="{new_id}"{markup[at:]}'


def create_use_reference(sprite_url: str, symbol_id: str, size: int | str = 24, class_name: str | None = None) -> str:
    class_attr = f' class="{class_name}"' if class_name else ""
    return f'<svg width="{size}" height="{size}"{class_attr}><use href="{sprite_url}#{symbol_id}"></use></svg>'


def _symbol_body(markup: str) -> str:
    return extract_body(clean(markup))


def _commit(path: Path, text: str, types_filename: str | None) -> SpriteUpdateStatus | None:
    """Write ``text`` if it parses; ``None`` on success, else the failure status."""
    if try_parse(text) is None:
        logger.error("Refusing to write %s: result is not well-formed XML", path)
        return SpriteUpdateStatus.MALFORMED_RESULT
    try:
        atomic_write_text(path, text)
    except OSError:
        logger.exception("Failed to write sprite %s", path)
        return SpriteUpdateStatus.WRITE_FAILED
    if types_filename:
        try:
            regenerate_from_sprite(path, path.with_name(types_filename))
        except OSError:
            logger.exception("Failed to regenerate %s next to %s", types_filename, path)
    return None


def update_sprite_symbol(
    name: str,
    markup: str,
    file_path: str | Path,
    view_box: str | None = None,
    types_filename: str | None = DEFAULT_TYPES_FILENAME,
) -> SpriteUpdateStatus:
    """Replace the content and viewBox of the symbol whose id is ``name``.

    The viewBox comes from ``markup`` if it has one, then ``view_box``, then
    the symbol's current value, then ``DEFAULT_VIEW_BOX``.
    """
    if not name or not markup or not file_path:
        return SpriteUpdateStatus.INVALID_INPUT
    path = Path(file_path)
    with path_lock(path):
        text = read_text(path)
        if text is None:
            return SpriteUpdateStatus.FILE_MISSING
        doc = SpriteDocument.parse(text)
        entry = doc.get(name)
        if entry is None:
            logger.info("Symbol %r not found in %s", name, path)
            return SpriteUpdateStatus.SYMBOL_MISSING

        new_view_box = view_box_or_default(markup, view_box or entry.view_box)
        element = build_symbol(entry.id, new_view_box, _symbol_body(markup), entry.attrs)
        if element is None:
            return SpriteUpdateStatus.INVALID_INPUT
        failure = _commit(path, doc.replace_symbol(entry, element), types_filename)
        if failure is not None:
            return failure
    logger.info("Updated symbol %r in %s", name, path)
    return SpriteUpdateStatus.UPDATED


def update_sprite_file(name: str, markup: str, file_path: str | Path, view_box: str | None = None) -> bool:
    """``True`` only when an existing symbol was rewritten."""
    return update_sprite_symbol(name, markup, file_path, view_box) == SpriteUpdateStatus.UPDATED


def add_to_sprite(
    asset: IconAsset,
    file_path: str | Path,
    types_filename: str | None = DEFAULT_TYPES_FILENAME,
) -> SpriteUpdateStatus:
    """Insert ``asset`` as a new symbol, creating the sprite on first use.

    An existing symbol with the same id is updated in place instead.
    """
    if not asset.name or not asset.markup or not file_path:
        return SpriteUpdateStatus.INVALID_INPUT
    path = Path(file_path)
    symbol_id = asset.symbol_id
    with path_lock(path):
        text = read_text(path)
        if text is not None and symbol_id in SpriteDocument.parse(text):
            return update_sprite_symbol(symbol_id, asset.markup, path, asset.view_box, types_filename)

        element = build_symbol(symbol_id, view_box_or_default(asset.markup, asset.view_box), _symbol_body(asset.markup))
        if element is None:
            return SpriteUpdateStatus.INVALID_INPUT
        if text is None:
            new_text = new_sprite([element])
        else:
            try:
                new_text = SpriteDocument.parse(text).insert_symbol(element)
            except ValueError as e:
                logger.error("Cannot add %r to %s: %s", symbol_id, path, e)
                return SpriteUpdateStatus.MALFORMED_RESULT
        failure = _commit(path, new_text, types_filename)
        if failure is not None:
            return failure
    logger.info("Added symbol %r to %s", symbol_id, path)
    return SpriteUpdateStatus.ADDED


def remove_from_sprite(
    name: str,
    file_path: str | Path,
    types_filename: str | None = DEFAULT_TYPES_FILENAME,
) -> SpriteUpdateStatus:
    if not name or not file_path:
        return SpriteUpdateStatus.INVALID_INPUT
    path = Path(file_path)
    with path_lock(path):
        text = read_text(path)
        if text is None:
            return SpriteUpdateStatus.FILE_MISSING
        doc = SpriteDocument.parse(text)
        entry = doc.get(name)
        if entry is None:
            return SpriteUpdateStatus.SYMBOL_MISSING
        failure = _commit(path, doc.remove_symbol(entry), types_filename)
        if failure is not None:
            return failure
    logger.info("Removed symbol %r from %s", name, path)
    return SpriteUpdateStatus.REMOVED


def list_symbols(file_path: str | Path) -> list[str]:
    text = read_text(file_path)
    return SpriteDocument.parse(text).ids if text is not None else []
