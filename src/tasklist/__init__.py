"""tasklist - an interactive, color-coded task list for the terminal."""

__version__ = "0.1.0"
