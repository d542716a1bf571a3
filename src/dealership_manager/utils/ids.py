"""Timestamp-based identifiers."""

from __future__ import annotations

import threading
import time

_lock = threading.Lock()
_last_id = 0


def new_id() -> str:
    """Return a millisecond timestamp id, strictly increasing within the process."""
    global _last_id
    with _lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return str(candidate)
