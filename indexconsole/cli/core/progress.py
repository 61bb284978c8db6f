"""Status messages and transitional indicators for CLI commands.

The spinner is the CLI rendering of a loading signal: it is shown while a
repository refresh or a selection fetch is in flight.
"""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import Iterator

from indexconsole.cli.console import get_console


def is_interactive() -> bool:
    """Check if we're running in an interactive terminal.

    Returns:
        True if interactive terminal, False in CI/non-interactive mode.
    """
    ci_vars = ["CI", "GITHUB_ACTIONS", "JENKINS_URL", "TRAVIS", "CIRCLECI", "GITLAB_CI"]
    if any(os.environ.get(var) for var in ci_vars):
        return False

    if os.environ.get("TERM") == "dumb":
        return False

    if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
        return False

    return True


class ProgressManager:
    """Consistent status output across commands."""

    @staticmethod
    @contextmanager
    def spinner(description: str = "Working...") -> Iterator[None]:
        """Show a spinner for the duration of the block.

        Prints nothing when not attached to a terminal, so piped output
        (for example --format json) stays clean.

        Example:
            with ProgressManager.spinner("Loading indexes..."):
                session = self.run_session(lambda s: s.load())
        """
        if not is_interactive():
            yield
            return

        with get_console().status(description):
            yield

    @staticmethod
    def print_success(message: str) -> None:
        """Print success message with checkmark."""
        get_console().print(f"[green][OK][/green] {message}")

    @staticmethod
    def print_error(message: str) -> None:
        """Print error message with X mark."""
        get_console().print(f"[red][ERROR][/red] {message}")

    @staticmethod
    def print_warning(message: str) -> None:
        """Print warning message."""
        get_console().print(f"[yellow][WARN][/yellow] {message}")

    @staticmethod
    def print_info(message: str) -> None:
        """Print informational message."""
        get_console().print(f"[cyan][INFO][/cyan] {message}")
