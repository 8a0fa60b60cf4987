"""Path-scoped locks serializing read-modify-write cycles on shared files."""

from __future__ import annotations

import os
import threading
from contextlib import contextmanager
from pathlib import Path

_locks: dict[str, threading.RLock] = {}
_guard = threading.Lock()


def _key(path: str | Path) -> str:
    return os.path.normcase(os.path.realpath(os.fspath(path)))


def lock_for(path: str | Path) -> threading.RLock:
    """The one lock shared by every writer of ``path``."""
    key = _key(path)
    with _guard:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = threading.RLock()
        return lock


@contextmanager
def path_lock(path: str | Path):
    lock = lock_for(path)
    with lock:
        yield
