"""Hard failures raised by the engine.

Everything else (malformed markup, missing files, unknown symbols) degrades
to a best-effort result or an explicit status value instead of raising.
"""

from __future__ import annotations


class UnsupportedTargetError(ValueError):
    """Requested framework has no registered generator."""


class UnsupportedOptionError(ValueError):
    """A generator was asked for a wrapper or body mode it cannot emit."""


class UnknownCollectionError(ValueError):
    """An external catalog collection identifier is not recognised."""
