"""CLI core utilities package.

- error_handlers: Centralized error handling with consistent formatting
- progress: Spinners and status messages
- initializers: Global options and configuration loading
- command_base: Base class for all CLI commands
"""

from __future__ import annotations

from indexconsole.cli.core.command_base import IndexConsoleCommand
from indexconsole.cli.core.error_handlers import CLIErrorHandler, cli_exception_handler
from indexconsole.cli.core.initializers import CLIInitializer
from indexconsole.cli.core.progress import ProgressManager, is_interactive

__all__ = [
    "CLIErrorHandler",
    "CLIInitializer",
    "IndexConsoleCommand",
    "ProgressManager",
    "cli_exception_handler",
    "is_interactive",
]
