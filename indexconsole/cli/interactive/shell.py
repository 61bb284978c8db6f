"""Shell command - Interactive console over one live session.

The shell keeps a single session open, so the index list, the detail pane
and the error slot persist between commands. Each line is parsed with
shlex and dispatched to the same handlers the one-shot commands use.
"""

from __future__ import annotations

import asyncio
import shlex
from pathlib import Path
from typing import Dict, List, Optional

import typer
from rich.markdown import Markdown
from rich.panel import Panel

from indexconsole.cli.console import ErrorRenderer
from indexconsole.cli.core.error_handlers import cli_exception_handler
from indexconsole.cli.index.base import IndexCommand
from indexconsole.cli.render import build_form_panel, build_selection_view
from indexconsole.commands import CommandResult, CommandStatus
from indexconsole.core.config import ConsoleConfig
from indexconsole.core.logging import get_logger
from indexconsole.session import ConsoleSession, open_session
from indexconsole.state import ActiveTab

logger = get_logger(__name__)

MAX_SHELL_ITERATIONS = 10000

PROMPT = "indexconsole> "

# Form fields reachable with `set FIELD VALUE`, per tab.
FORM_FIELDS: Dict[ActiveTab, Dict[str, str]] = {
    ActiveTab.CREATE: {"name": "name", "description": "description"},
    ActiveTab.UPLOAD: {
        "index": "target_index",
        "file": "file",
        "name": "document_name",
        "type": "document_type",
    },
}

HELP_TEXT = """# IndexConsole Shell

Commands:
- `list` / `refresh` - Reload and show all indexes
- `info NAME` - Show details of one index
- `tab list|create|upload` - Switch tab
- `set FIELD VALUE` - Fill a field of the active form
- `submit` - Submit the active form
- `create NAME [DESCRIPTION]` - Create an index
- `delete NAME` - Delete an empty index (asks first)
- `upload INDEX FILE [NAME] [TYPE]` - Upload a document
- `clear` - Close the detail pane
- `help` - Show this help message
- `quit` or `exit` - Exit shell

Press Ctrl+C to exit at any time."""


class ShellCommand(IndexCommand):
    """Interactive REPL over one console session."""

    def execute(self) -> int:
        """Start interactive shell."""
        try:
            config = self.load_config()
            return asyncio.run(self._main(config))
        except KeyboardInterrupt:
            self.console.print("\n[yellow]Shell session ended[/yellow]")
            return 0
        except Exception as e:
            return self.handle_error(e, "Interactive shell failed")

    async def _main(self, config: ConsoleConfig) -> int:
        async with open_session(config, confirm=typer.confirm) as session:
            self._display_welcome()
            await session.load()
            self._show_list(session)
            self._show_errors(session)
            return await self._run_shell_loop(session)

    def _display_welcome(self) -> None:
        self.console.print()
        self.console.print(Panel(Markdown(HELP_TEXT), title="Welcome", border_style="cyan"))
        self.console.print()

    async def _run_shell_loop(self, session: ConsoleSession) -> int:
        """Run main shell loop (bounded)."""
        for _ in range(MAX_SHELL_ITERATIONS):
            line = await self._get_user_input()
            if line is None:
                break
            if not line:
                continue
            if not await self.dispatch(session, line):
                break
            self._show_errors(session)
        else:
            raise AssertionError(f"Shell loop exceeded {MAX_SHELL_ITERATIONS} iterations")

        return 0

    async def _get_user_input(self) -> Optional[str]:
        """Read one line off the event loop; None on end of input."""
        try:
            line = await asyncio.to_thread(input, f"\n{PROMPT}")
        except EOFError:
            return None
        return line.strip()

    # === Dispatch ===

    async def dispatch(self, session: ConsoleSession, line: str) -> bool:
        """Run one shell line.

        Returns:
            True to continue, False to exit
        """
        try:
            words = shlex.split(line)
        except ValueError as e:
            self.print_warning(f"Could not parse input: {e}")
            return True
        if not words:
            return True

        name, args = words[0].lower(), words[1:]
        logger.debug("Shell command", command=name, args=len(args))

        if name in ("quit", "exit"):
            return False
        if name == "help":
            self._display_welcome()
        elif name in ("list", "refresh"):
            await session.reload()
            self._show_list(session)
        elif name == "info":
            await self._info(session, args)
        elif name == "tab":
            self._switch_tab(session, args)
        elif name == "set":
            self._set_field(session, args)
        elif name == "submit":
            await self._submit(session)
        elif name == "create":
            await self._create(session, args)
        elif name == "delete":
            await self._delete(session, args)
        elif name == "upload":
            await self._upload(session, args)
        elif name == "clear":
            session.selection.clear()
            self.print_info("Detail pane closed")
        else:
            self.print_warning(f"Unknown command: {name} (type 'help')")
        return True

    async def _info(self, session: ConsoleSession, args: List[str]) -> None:
        if len(args) != 1:
            self.print_warning("Usage: info NAME")
            return
        await session.inspect(args[0])
        self._show_selection(session)

    def _switch_tab(self, session: ConsoleSession, args: List[str]) -> None:
        choices = [tab.value for tab in ActiveTab]
        if len(args) != 1 or args[0].lower() not in choices:
            self.print_warning(f"Usage: tab {'|'.join(choices)}")
            return
        session.view.switch_to(ActiveTab(args[0].lower()))
        self._show_tab(session)

    def _set_field(self, session: ConsoleSession, args: List[str]) -> None:
        tab = session.view.active_tab
        fields = FORM_FIELDS.get(tab)
        if fields is None:
            self.print_warning("Switch to the create or upload tab first")
            return
        if len(args) < 1 or args[0].lower() not in fields:
            self.print_warning(f"Usage: set {'|'.join(fields)} VALUE")
            return

        attr = fields[args[0].lower()]
        value = " ".join(args[1:])
        form = session.view.create_form if tab is ActiveTab.CREATE else session.view.upload_form
        if attr == "file":
            form.file = Path(value).expanduser() if value else None
        else:
            setattr(form, attr, value)
        self._show_tab(session)

    async def _submit(self, session: ConsoleSession) -> None:
        tab = session.view.active_tab
        if tab is ActiveTab.CREATE:
            self._report(session, await session.submit_create())
        elif tab is ActiveTab.UPLOAD:
            self._report(session, await session.submit_upload())
        else:
            self.print_warning("Nothing to submit on the list tab")

    async def _create(self, session: ConsoleSession, args: List[str]) -> None:
        if not 1 <= len(args) <= 2:
            self.print_warning("Usage: create NAME [DESCRIPTION]")
            return
        form = session.view.create_form
        form.name = args[0]
        form.description = args[1] if len(args) > 1 else ""
        self._report(session, await session.submit_create())

    async def _delete(self, session: ConsoleSession, args: List[str]) -> None:
        if len(args) != 1:
            self.print_warning("Usage: delete NAME")
            return
        self._report(session, await session.delete.run(args[0]))

    async def _upload(self, session: ConsoleSession, args: List[str]) -> None:
        if not 2 <= len(args) <= 4:
            self.print_warning("Usage: upload INDEX FILE [NAME] [TYPE]")
            return
        form = session.view.upload_form
        form.target_index = args[0]
        form.file = Path(args[1]).expanduser()
        form.document_name = args[2] if len(args) > 2 else ""
        form.document_type = args[3] if len(args) > 3 else ""
        self._report(session, await session.submit_upload())

    # === Rendering ===

    def _report(self, session: ConsoleSession, result: CommandResult) -> None:
        if result.status is CommandStatus.SUCCEEDED:
            self.print_success(f"{result.command} {result.index_name}: done")
            self._show_list(session)
            self._show_selection(session)
        elif result.status is CommandStatus.CANCELLED:
            self.print_info("Cancelled")
        elif result.status is CommandStatus.SKIPPED:
            self.print_warning(f"{result.command} {result.index_name} is already running")

    def _show_list(self, session: ConsoleSession) -> None:
        self.display_indexes(session)

    def _show_selection(self, session: ConsoleSession) -> None:
        view = build_selection_view(session.selection, self.date_format)
        if view is not None:
            self.console.print(view)

    def _show_tab(self, session: ConsoleSession) -> None:
        panel = build_form_panel(session.view)
        if panel is None:
            self._show_list(session)
        else:
            self.console.print(panel)

    def _show_errors(self, session: ConsoleSession) -> None:
        error = session.view.errors.error
        if error is not None:
            ErrorRenderer.render(error)


@cli_exception_handler
def command() -> None:
    """Start the interactive console.

    Keeps one session open: the index list, the detail pane and the last
    error stay on screen between commands.

    Examples:
        indexconsole shell
        indexconsole --base-url http://indexer:5278 shell
    """
    cmd = ShellCommand()
    exit_code = cmd.execute()
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
