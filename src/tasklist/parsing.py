"""Parsers for the text typed at the shell prompts."""

from __future__ import annotations

from datetime import datetime

from tasklist.models import Priority

# 24-hour clock, local time, e.g. "14:30 25-12-2026"
DUE_TIME_FORMAT = "%H:%M %d-%m-%Y"


def parse_priority(token: str) -> Priority | None:
    """Parse a priority token.

    Only the exact lowercase names "high", "medium" and "low" are accepted.

    Args:
        token: Raw user input.

    Returns:
        The matching Priority, or None if the token isn't recognised.
    """
    token = token.strip()
    for priority in Priority:
        if priority.value == token:
            return priority
    return None


def parse_due_time(text: str) -> datetime | None:
    """Parse a due time in ``HH:MM dd-mm-yyyy`` format.

    Args:
        text: Raw user input.

    Returns:
        The parsed datetime, or None if the input is empty.

    Raises:
        ValueError: If the input is non-empty and doesn't match the format.
    """
    text = text.strip()
    if not text:
        return None
    return datetime.strptime(text, DUE_TIME_FORMAT)


def parse_index(text: str) -> int | None:
    """Parse a non-negative task index, returning None if invalid.

    A single leading "+" is accepted, e.g. "+2".
    """
    text = text.strip()
    if text.startswith("+"):
        text = text[1:]
    if not text.isascii() or not text.isdigit():
        return None
    return int(text)
