"""Create command - Create a new index."""

from __future__ import annotations

from typing import Optional

import typer

from indexconsole.cli.core.progress import ProgressManager
from indexconsole.cli.index.base import IndexCommand
from indexconsole.commands import CommandResult


class CreateCommand(IndexCommand):
    """Create an index and show the refreshed list."""

    def execute(self, index_name: str, description: Optional[str] = None) -> int:
        try:
            outcome: dict[str, CommandResult] = {}

            async def _create(session) -> None:
                outcome["result"] = await session.create.run(index_name, description)

            with ProgressManager.spinner(f"Creating index {index_name}..."):
                session = self.run_session(_create)

            if not outcome["result"].succeeded:
                return self.report_errors(session, "While creating index")

            self.print_success(f"Created index: {index_name.strip()}")
            self.display_indexes(session)
            return 0

        except Exception as e:
            return self.handle_error(e, "Failed to create index")


# Typer command wrapper
def command(
    index_name: str = typer.Argument(..., help="Index name"),
    description: Optional[str] = typer.Option(
        None, "--description", "-d", help="Optional description"
    ),
) -> None:
    """Create a new index.

    Examples:
        indexconsole index create RFP-2024
        indexconsole index create RFP-2024 -d "cruise line"
    """
    cmd = CreateCommand()
    exit_code = cmd.execute(index_name, description)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
