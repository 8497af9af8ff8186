"""Logger implementations for Holograph.

Key classes:
- TerminalLogger: Writes styled messages to the terminal through click.
- MemoryLogger: Keeps messages in memory, grouped by level.

Quiet and verbose settings belong to each logger instance; nothing here is
module-level state, so every build reports through the logger its caller
passes in.
"""

from __future__ import annotations

import click

LEVELS = ("error", "warning", "notice", "info")


class MemoryLogger:
    """Stores log messages in memory.

    Attributes:
        messages: Dictionary mapping each level to the list of its messages.
    """

    def __init__(self):
        self.messages: dict[str, list[str]] = {level: [] for level in LEVELS}

    def error(self, message: str) -> None:
        self.messages["error"].append(message)

    def warning(self, message: str) -> None:
        self.messages["warning"].append(message)

    def notice(self, message: str) -> None:
        self.messages["notice"].append(message)

    def info(self, message: str) -> None:
        self.messages["info"].append(message)


class TerminalLogger:
    """Writes log messages to the terminal.

    Errors and warnings go to stderr and are always shown. Notices are hidden
    in quiet mode; info messages only appear in verbose mode.

    Attributes:
        quiet: Suppress notices and info messages.
        verbose: Show info messages.
        warning_count: Number of warnings reported so far.
    """

    def __init__(self, quiet: bool = False, verbose: bool = False):
        self.quiet = quiet
        self.verbose = verbose
        self.warning_count = 0

    def error(self, message: str) -> None:
        click.echo(click.style(message, fg="red", bold=True), err=True)

    def warning(self, message: str) -> None:
        self.warning_count += 1
        click.echo(click.style(f"Warning: {message}", fg="yellow"), err=True)

    def notice(self, message: str) -> None:
        if self.quiet:
            return
        click.echo(message.rstrip("\n"))

    def info(self, message: str) -> None:
        if self.quiet or not self.verbose:
            return
        click.echo(click.style(f">> {message.rstrip()}", fg="blue"))
