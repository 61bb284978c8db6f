"""Delete command - Delete an index.

Asks for confirmation unless --yes is given. The service refuses to delete
a non-empty index; that refusal is shown as an error.
"""

from __future__ import annotations

import typer

from indexconsole.cli.index.base import IndexCommand
from indexconsole.commands import CommandResult, CommandStatus


def _accept(prompt: str) -> bool:
    return True


class DeleteCommand(IndexCommand):
    """Delete index."""

    def execute(self, index_name: str, yes: bool = False) -> int:
        """Delete index.

        Args:
            index_name: Index name
            yes: Skip the confirmation prompt

        Returns:
            0 on success or cancellation, 1 on error
        """
        try:
            outcome: dict[str, CommandResult] = {}

            async def _delete(session) -> None:
                outcome["result"] = await session.delete.run(index_name)

            confirm = _accept if yes else typer.confirm
            session = self.run_session(_delete, confirm=confirm)
            result = outcome["result"]

            if result.status is CommandStatus.CANCELLED:
                self.print_info("Deletion cancelled")
                return 0

            if not result.succeeded:
                return self.report_errors(session, f"While deleting {index_name}")

            self.print_success(f"Deleted index: {index_name.strip()}")
            self.display_indexes(session)
            return 0

        except Exception as e:
            return self.handle_error(e, "Failed to delete index")


# Typer command wrapper
def command(
    index_name: str = typer.Argument(..., help="Index name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Delete without confirmation"),
) -> None:
    """Delete an index.

    Only empty indexes can be deleted; the service rejects the rest.

    Examples:
        # Delete index (with confirmation)
        indexconsole index delete RFP-2024

        # Skip the prompt
        indexconsole index delete RFP-2024 --yes
    """
    cmd = DeleteCommand()
    exit_code = cmd.execute(index_name, yes)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
