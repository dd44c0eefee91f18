"""Data models for tasklist."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Priority(Enum):
    """Task priority levels, declared from most to least urgent."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def sort_key(self) -> int:
        """Rank in declaration order; HIGH sorts first."""
        return _RANKS[self]

    def color(self) -> str:
        """Return the rich color name used to display this priority."""
        return _COLORS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.sort_key >= other.sort_key


_RANKS: dict[Priority, int] = {priority: rank for rank, priority in enumerate(Priority)}

_COLORS: dict[Priority, str] = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}


@dataclass
class Task:
    """A single task in the list.

    Only ``completed`` changes after construction.
    """

    description: str
    priority: Priority = Priority.MEDIUM
    due_time: datetime | None = None
    completed: bool = False

    def complete(self) -> None:
        """Mark the task as completed."""
        self.completed = True
