"""Base class for all CLI commands.

A command object owns one console run: it loads the configuration, opens a
session, awaits the session action on a fresh event loop, and maps the
outcome to an exit code.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional, TypeVar

from rich.console import Console

from indexconsole.cli.console import ErrorRenderer, get_console
from indexconsole.cli.core.error_handlers import CLIErrorHandler
from indexconsole.cli.core.initializers import CLIInitializer
from indexconsole.cli.core.progress import ProgressManager
from indexconsole.commands import ConfirmFn, deny
from indexconsole.core.config import ConsoleConfig
from indexconsole.session import ConsoleSession, open_session

T = TypeVar("T")


class IndexConsoleCommand(ABC):
    """Abstract base class for all IndexConsole CLI commands.

    Provides common functionality:
    - Console output (via ProgressManager)
    - Error handling (via CLIErrorHandler)
    - Configuration (via CLIInitializer)
    - Session lifecycle (run_session)

    Example:
        class MyCommand(IndexConsoleCommand):
            def execute(self) -> int:
                session = self.run_session(lambda s: s.load())
                return self.report_errors(session)
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize command.

        Args:
            console: Rich console (for testing, inject mock)
        """
        self.console = console or get_console()

    @abstractmethod
    def execute(self, *args: Any, **kwargs: Any) -> int:
        """Execute the command.

        Returns:
            Exit code (0 = success, non-zero = error)
        """

    # === Configuration & session ===

    def load_config(self) -> ConsoleConfig:
        return CLIInitializer.load_config()

    def run_session(
        self,
        action: Callable[[ConsoleSession], Awaitable[Any]],
        confirm: ConfirmFn = deny,
    ) -> ConsoleSession:
        """Open a session, await ``action`` on it, and return the session.

        The returned session is closed but its state containers stay
        readable for rendering.
        """
        config = self.load_config()

        async def _main() -> ConsoleSession:
            async with open_session(config, confirm=confirm) as session:
                await action(session)
                return session

        return asyncio.run(_main())

    def report_errors(self, session: ConsoleSession, context: str = "") -> int:
        """Render the error slot, if populated.

        Returns:
            1 when an error was shown, 0 otherwise
        """
        error = session.view.errors.error
        if error is None:
            return 0
        ErrorRenderer.render(error, context=context)
        return 1

    # === Output Methods ===

    def print_success(self, message: str) -> None:
        ProgressManager.print_success(message)

    def print_error(self, message: str) -> None:
        ProgressManager.print_error(message)

    def print_warning(self, message: str) -> None:
        ProgressManager.print_warning(message)

    def print_info(self, message: str) -> None:
        ProgressManager.print_info(message)

    # === Error Handling ===

    def handle_error(self, error: Exception, context: str = "") -> int:
        """Handle command error and return exit code.

        Returns:
            Exit code (1 for error)
        """
        CLIErrorHandler.handle_error(error, context)
        return 1
