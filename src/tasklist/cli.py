"""CLI interface for tasklist."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from tasklist import __version__
from tasklist.config import CONFIG_FILE, ConfigError, TasklistConfig
from tasklist.manager import TaskManager
from tasklist.shell import TaskShell


def make_console(color: str) -> Console:
    """Create the Console for the given color choice (auto, always, never)."""
    if color == "always":
        return Console(force_terminal=True, highlight=False)
    if color == "never":
        return Console(no_color=True, highlight=False)
    return Console(highlight=False)


@click.command()
@click.version_option(version=__version__, prog_name="tasklist")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_FILE,
    show_default=True,
    help="Config file to load",
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Report out-of-range task indices instead of ignoring them",
)
@click.option(
    "--color",
    type=click.Choice(["auto", "always", "never"]),
    default=None,
    help="When to use terminal colors",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path,
    strict: bool | None,
    color: str | None,
) -> None:
    """tasklist - a color-coded task list for the terminal.

    \b
    Commands at the prompt:
      add        Add a task with a priority and optional due time
      complete   Mark a task as done by its index
      print      Show all tasks, highest priority first
      quit       Exit
    """
    try:
        config = TasklistConfig.load(config_path)
    except ConfigError as e:
        Console(stderr=True).print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        ctx.exit(1)

    if strict is not None:
        config.strict_indices = strict
    if color is not None:
        config.color = color  # type: ignore[assignment]

    console = make_console(config.color)
    manager = TaskManager(strict=config.strict_indices)
    TaskShell(manager, console=console).run()
