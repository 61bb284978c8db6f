"""Console output helpers.

Provides the shared rich Console, the verbose flag, and ErrorRenderer,
which turns any exception into a panel with "Why it happened" and
"How to fix" sections.
"""

from __future__ import annotations

import traceback
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from indexconsole.core.exceptions import ApiError, get_error_info

# Shared console instance
_console: Console | None = None

# Verbose mode flag (set by CLI --verbose flag)
_verbose_mode: bool = False


def get_console() -> Console:
    """Get shared console instance (lazy-loaded).

    Returns:
        Rich Console instance
    """
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_verbose_mode(enabled: bool) -> None:
    """Enable or disable verbose mode for error display.

    When verbose mode is enabled, full tracebacks are shown.
    """
    global _verbose_mode
    _verbose_mode = enabled


def is_verbose_mode() -> bool:
    return _verbose_mode


def tip(message: str) -> None:
    """Display a tip message to guide users.

    Example:
        tip("Use 'indexconsole index create NAME' to add one")
        # Output: "  Tip: Use 'indexconsole index create NAME' to add one"
    """
    get_console().print(f"  [dim]Tip: {message}[/dim]")


class ErrorRenderer:
    """Renders helpful error messages with "Why" and "How to fix" sections.

    Example
    -------
        +------------------------------+
        | Error: IC-API-001            |
        +------------------------------+
        | 409 Conflict - index is not  |
        | empty                        |
        |                              |
        | Why it happened:             |
        |   The indexing service ...   |
        |                              |
        | How to fix:                  |
        |   - Read the service message |
        +------------------------------+
    """

    @staticmethod
    def render(
        exc: BaseException,
        context: str = "",
        show_traceback: Optional[bool] = None,
    ) -> None:
        """Render an exception as a helpful error panel.

        Args:
            exc: Exception to render
            context: Optional context message (e.g., "While deleting RFP-2024")
            show_traceback: Override for verbose mode (None = use global setting)
        """
        console = get_console()

        error_info = get_error_info(exc)
        error_code = error_info.get("error_code", "IC-ERR-999")
        why = error_info.get("why_it_happened", "An unexpected error occurred")
        how_to_fix = error_info.get("how_to_fix", ["Check the error message"])

        content = ErrorRenderer._build_error_content(
            message=format_error(exc),
            context=context,
            why=why,
            how_to_fix=how_to_fix,
        )

        panel = Panel(
            content,
            title=f"[bold red]Error: {error_code}[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
        console.print(panel)

        should_show_traceback = (
            show_traceback if show_traceback is not None else is_verbose_mode()
        )
        if should_show_traceback:
            ErrorRenderer._render_traceback(exc)

    @staticmethod
    def _build_error_content(
        message: str,
        context: str,
        why: str,
        how_to_fix: List[str],
    ) -> Text:
        text = Text()

        if context:
            text.append(f"{context}\n", style="dim")
            text.append("\n")

        text.append(message, style="bold red")
        text.append("\n\n")

        text.append("Why it happened:\n", style="bold cyan")
        text.append(f"  {why}\n", style="cyan")
        text.append("\n")

        text.append("How to fix:\n", style="bold green")
        for fix in how_to_fix:
            text.append(f"  - {fix}\n", style="green")

        return text

    @staticmethod
    def _render_traceback(exc: BaseException) -> None:
        console = get_console()
        console.print()
        console.print("[dim]--- Traceback (--verbose mode) ---[/dim]")
        tb_lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
        console.print("".join(tb_lines), style="dim", markup=False)


def format_error(exc: BaseException) -> str:
    """One-line message for the error slot.

    ApiError messages already hold status, reason and body; the request
    line is prefixed when known.
    """
    if isinstance(exc, ApiError) and exc.method and exc.path:
        return f"{exc.method} {exc.path}: {exc}"
    return str(exc) or type(exc).__name__
