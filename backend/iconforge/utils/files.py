"""File helpers. No engine imports."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def atomic_write_text(path: str | Path, content: str, encoding: str = "utf-8") -> None:
    """Write via a sibling temp file and ``os.replace`` so readers never see half a file."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = tempfile.NamedTemporaryFile(
        "w",
        encoding=encoding,
        newline="",
        dir=target.parent,
        prefix=f".{target.name}.",
        suffix=".tmp",
        delete=False,
    )
    try:
        with tmp:
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp.name, target)
    except BaseException:
        try:
            os.unlink(tmp.name)
        except OSError:
            logger.debug("Could not remove temp file %s", tmp.name)
        raise


def read_text(path: str | Path, encoding: str = "utf-8") -> str | None:
    """File content, or ``None`` when the file is missing or unreadable."""
    try:
        # newline="" keeps CRLF files byte-identical across a rewrite
        with open(path, encoding=encoding, newline="") as fh:
            return fh.read()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", path, e)
        return None


def resolve_within(base: str | Path, path: str | Path) -> Path:
    """``path`` resolved against ``base``; raises ``ValueError`` if it lands outside ``base``."""
    root = Path(base).resolve()
    target = (root / path).resolve()
    if not target.is_relative_to(root):
        raise ValueError(f"Path {str(path)!r} is outside {root}")
    return target
