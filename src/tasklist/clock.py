"""Time sources used when rendering due times."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]
"""A zero-argument callable returning the current naive local time."""


def system_clock() -> datetime:
    """Return the current local wall-clock time."""
    return datetime.now()


def fixed_clock(instant: datetime) -> Clock:
    """Return a clock that always reports ``instant``.

    Args:
        instant: The time every call should return.

    Returns:
        A Clock suitable for passing to TaskManager.
    """

    def _now() -> datetime:
        return instant

    return _now
