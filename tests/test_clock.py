"""Tests for tasklist.clock module."""

from __future__ import annotations

from datetime import datetime

from tasklist.clock import fixed_clock, system_clock


def test_system_clock_is_current() -> None:
    """Test system_clock reads local wall-clock time."""
    before = datetime.now()
    reading = system_clock()
    after = datetime.now()
    assert before <= reading <= after
    assert reading.tzinfo is None


def test_fixed_clock_is_constant() -> None:
    """Test fixed_clock always returns the same instant."""
    instant = datetime(2026, 5, 1, 12, 0)
    clock = fixed_clock(instant)
    assert clock() == instant
    assert clock() == instant
