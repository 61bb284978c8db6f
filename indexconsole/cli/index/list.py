"""List command - List all indexes.

Fetches the index list from the service and renders it as a table or JSON.
"""

from __future__ import annotations

import typer

from indexconsole.cli.core.progress import ProgressManager
from indexconsole.cli.index.base import OUTPUT_FORMATS, IndexCommand


class ListCommand(IndexCommand):
    """List all indexes."""

    def execute(self, output_format: str = "table") -> int:
        """List indexes.

        Args:
            output_format: "table" or "json"

        Returns:
            0 on success, 1 on error
        """
        try:
            if output_format not in OUTPUT_FORMATS:
                self.print_error(f"Unknown format: {output_format}")
                return 1

            with ProgressManager.spinner("Loading indexes..."):
                session = self.run_session(lambda s: s.load())

            if session.view.errors:
                return self.report_errors(session, "While loading indexes")

            if output_format == "json":
                self.print_json(self.indexes_as_json(session))
                return 0

            self.display_indexes(session)
            count = len(session.repository)
            self.print_info(f"Total: {count} index{'es' if count != 1 else ''}")
            return 0

        except Exception as e:
            return self.handle_error(e, "Failed to list indexes")


# Typer command wrapper
def command(
    output_format: str = typer.Option(
        "table", "--format", "-f", help="Output format: table or json"
    ),
) -> None:
    """List all indexes.

    Shows name, description, document count and creation date for every
    index known to the service.

    Examples:
        # List indexes
        indexconsole index list

        # Machine-readable output
        indexconsole index list --format json
    """
    cmd = ListCommand()
    exit_code = cmd.execute(output_format)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
