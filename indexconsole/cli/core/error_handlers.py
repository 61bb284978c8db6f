"""Standard error handling for CLI commands.

Errors that escape a command (configuration problems, unexpected bugs)
are rendered with ErrorRenderer and mapped to an exit code. Errors that a
handler already caught live in the session's error slot and are rendered
by the command itself.
"""

from __future__ import annotations

from typing import Any, Callable

import typer

from indexconsole.cli.console import ErrorRenderer, get_console
from indexconsole.core.logging import get_logger

logger = get_logger(__name__)


class CLIErrorHandler:
    """Centralized error handling with consistent formatting.

    Example:
        try:
            config = load_config()
        except Exception as e:
            CLIErrorHandler.exit_on_error(e, "Could not load configuration")
    """

    @staticmethod
    def handle_error(error: BaseException, context: str = "") -> None:
        """Display error with helpful formatting."""
        logger.debug("Rendering error", error=type(error).__name__, context=context)
        ErrorRenderer.render(error, context=context)

    @staticmethod
    def exit_on_error(error: BaseException, context: str = "", exit_code: int = 1) -> None:
        """Handle error and exit CLI with appropriate exit code.

        Raises:
            typer.Exit: Always raises to exit CLI
        """
        CLIErrorHandler.handle_error(error, context)
        raise typer.Exit(exit_code)

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        """Handle Ctrl+C gracefully."""
        get_console().print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(130)


def cli_exception_handler(func: Callable) -> Callable:
    """Decorator to wrap CLI commands with exception handling.

    Example:
        @cli_exception_handler
        def my_command():
            ...
    """
    from functools import wraps

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            CLIErrorHandler.handle_keyboard_interrupt()
        except (SystemExit, typer.Exit):
            raise
        except Exception as e:
            CLIErrorHandler.exit_on_error(e)

    return wrapper
