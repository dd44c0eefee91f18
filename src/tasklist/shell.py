"""Interactive read-evaluate-print loop for tasklist."""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

from rich.console import Console

from tasklist.manager import IndexOutOfRangeError, TaskManager
from tasklist.models import Priority
from tasklist.parsing import parse_due_time, parse_index, parse_priority

COMMAND_PROMPT = "Enter a command (add/complete/print/quit): "


class TaskShell:
    """Prompt-driven shell around a TaskManager.

    Reads one command per line and dispatches it. The loop ends on ``quit``,
    end of input, or Ctrl-C.
    """

    def __init__(
        self,
        manager: TaskManager,
        console: Console | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialise the shell.

        Args:
            manager: The task list to operate on.
            console: Rich Console for prompts and output (creates default if None).
            stream: Optional stream to read input lines from instead of stdin.
        """
        self.manager = manager
        self.console = console or Console(highlight=False)
        self._stream = stream
        self._commands: dict[str, Callable[[], bool]] = {
            "add": self.cmd_add,
            "complete": self.cmd_complete,
            "print": self.cmd_print,
            "quit": self.cmd_quit,
        }

    def _read(self, prompt: str) -> str:
        """Prompt for and return one trimmed line.

        Raises:
            EOFError: If input is exhausted.
        """
        if self._stream is None:
            line = self.console.input(prompt, markup=False)
        else:
            line = self.console.input(prompt, markup=False, stream=self._stream)
            if not line:
                raise EOFError
        return line.strip()

    def run(self) -> None:
        """Run the loop until the user quits or input ends."""
        try:
            while self.handle(self._read(COMMAND_PROMPT)):
                pass
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            self.cmd_quit()

    def handle(self, command: str) -> bool:
        """Dispatch a single command.

        Returns:
            False if the loop should stop, True otherwise.
        """
        handler = self._commands.get(command.strip())
        if handler is None:
            self.console.print("[red]Unknown command.[/red]")
            return True
        return handler()

    def cmd_add(self) -> bool:
        """Prompt for a new task's fields and add it."""
        description = self._read("Enter task description: ")

        priority = parse_priority(self._read("Enter task priority (high/medium/low): "))
        if priority is None:
            self.console.print("[yellow]Invalid priority. Using medium.[/yellow]")
            priority = Priority.MEDIUM

        raw_due = self._read("Enter due time (HH:MM dd-mm-yyyy) or leave empty: ")
        try:
            due_time = parse_due_time(raw_due)
        except ValueError:
            self.console.print("[yellow]Invalid date format. Leaving due time empty.[/yellow]")
            due_time = None

        self.manager.add_task(description, priority, due_time)
        self.console.print("[green]Task added.[/green]")
        return True

    def cmd_complete(self) -> bool:
        """Show the list and complete the task at the chosen index."""
        self.print_tasks()

        index = parse_index(self._read("Enter task index to complete: "))
        if index is None:
            self.console.print("[red]Invalid index.[/red]")
            return True

        try:
            self.manager.complete_task(index)
        except IndexOutOfRangeError as e:
            self.console.print(f"[red]Error:[/red] {e}")
            return True

        self.console.print("[green]Task completed.[/green]")
        return True

    def cmd_print(self) -> bool:
        """Print the current task list."""
        self.print_tasks()
        return True

    def cmd_quit(self) -> bool:
        """Say goodbye and stop the loop."""
        self.console.print("Goodbye!")
        return False

    def print_tasks(self) -> None:
        """Print one styled line per task."""
        lines = self.manager.render()
        if not lines:
            self.console.print("[dim]No tasks.[/dim]")
            return
        for line in lines:
            self.console.print(line, soft_wrap=True)
