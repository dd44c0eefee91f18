"""Shared fixtures for tasklist tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from datetime import datetime
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from tasklist.clock import fixed_clock
from tasklist.manager import TaskManager

NOW = datetime(2026, 3, 14, 9, 30)


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def manager() -> TaskManager:
    """A lenient manager whose clock is frozen at NOW."""
    return TaskManager(clock=fixed_clock(NOW))


@pytest.fixture
def strict_manager() -> TaskManager:
    """A strict manager whose clock is frozen at NOW."""
    return TaskManager(clock=fixed_clock(NOW), strict=True)


@pytest.fixture
def console() -> Console:
    """A plain, wide console writing to memory."""
    return Console(file=StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def now() -> datetime:
    """The instant the test clocks are frozen at."""
    return NOW
