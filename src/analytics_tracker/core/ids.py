"""Canonical ID and timestamp factories for tracked events.

All modules import from here instead of defining local _uuid()/_now() copies.

Timestamp Rule
--------------
Event timestamps are ``int`` epoch milliseconds, taken from the wall clock.
"""

from __future__ import annotations

import time
import uuid


def new_event_id() -> str:
    """Generate a new UUID v4 string.  Use for every event id."""
    return str(uuid.uuid4())


def now_ms() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000
