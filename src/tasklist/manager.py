"""Task collection with priority ordering and colored rendering."""

from __future__ import annotations

from datetime import datetime, timedelta

from rich.text import Text

from tasklist.clock import Clock, system_clock
from tasklist.models import Priority, Task

# Styles for the due-time suffix, independent of the task's priority color
DUE_STYLE = "green"
OVERDUE_STYLE = "red"

_HOUR = timedelta(hours=1)


class IndexOutOfRangeError(IndexError):
    """Raised in strict mode when completing a task index that doesn't exist."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"No task at index {index} ({count} tasks)")


def due_suffix(due_time: datetime, now: datetime) -> tuple[str, str]:
    """Describe a due time relative to ``now``.

    Hours are truncated, so 1h59m left reads as "Due in 1 hours".

    Args:
        due_time: When the task is due.
        now: The current time.

    Returns:
        Tuple of (suffix text, rich style).
    """
    if due_time > now:
        hours = (due_time - now) // _HOUR
        return f"Due in {hours} hours", DUE_STYLE
    return "Overdue", OVERDUE_STYLE


class TaskManager:
    """Owns the task list and keeps it sorted by priority.

    Tasks are addressed by their zero-based position, which changes
    whenever a task is added.

    Attributes:
        strict: If True, completing an out-of-range index raises
            IndexOutOfRangeError instead of being ignored.
    """

    def __init__(self, clock: Clock = system_clock, strict: bool = False) -> None:
        self._tasks: list[Task] = []
        self._clock = clock
        self.strict = strict

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the tasks in display order."""
        return tuple(self._tasks)

    def add_task(
        self,
        description: str,
        priority: Priority,
        due_time: datetime | None = None,
    ) -> None:
        """Add a pending task and re-sort the list.

        The sort is stable, so the new task lands after existing tasks of
        the same priority.
        """
        self._tasks.append(Task(description=description, priority=priority, due_time=due_time))
        self._tasks.sort(key=lambda task: task.priority.sort_key)

    def complete_task(self, index: int) -> None:
        """Mark the task at ``index`` as completed.

        An out-of-range index leaves the list unchanged. It is ignored
        unless the manager is strict.

        Raises:
            IndexOutOfRangeError: If strict and there is no task at ``index``.
        """
        if 0 <= index < len(self._tasks):
            self._tasks[index].complete()
        elif self.strict:
            raise IndexOutOfRangeError(index, len(self._tasks))

    def render(self) -> list[Text]:
        """Build one styled line per task in current order.

        The clock is read on every call, so overdue status follows real time.
        """
        now = self._clock()
        lines = []
        for index, task in enumerate(self._tasks):
            status = "[x]" if task.completed else "[ ]"
            line = Text()
            line.append(f"{status} {index}: {task.description}", style=task.priority.color())
            if task.due_time is not None:
                suffix, style = due_suffix(task.due_time, now)
                line.append(f" ({suffix})", style=style)
            lines.append(line)
        return lines
