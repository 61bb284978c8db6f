"""Interactive shell package."""

from __future__ import annotations

from indexconsole.cli.interactive.shell import ShellCommand

__all__ = ["ShellCommand"]
