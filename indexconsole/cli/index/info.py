"""Info command - Show index details.

Selects one index by name and renders its detail record.
"""

from __future__ import annotations

import typer

from indexconsole.cli.core.progress import ProgressManager
from indexconsole.cli.index.base import OUTPUT_FORMATS, IndexCommand
from indexconsole.cli.render import index_to_dict


class InfoCommand(IndexCommand):
    """Show details of one index."""

    def execute(self, index_name: str, output_format: str = "table") -> int:
        """Show index details.

        Args:
            index_name: Index name
            output_format: "table" or "json"

        Returns:
            0 on success, 1 on error
        """
        try:
            if output_format not in OUTPUT_FORMATS:
                self.print_error(f"Unknown format: {output_format}")
                return 1

            with ProgressManager.spinner(f"Loading {index_name}..."):
                session = self.run_session(lambda s: s.inspect(index_name))

            index = session.selection.current
            if session.view.errors or index is None:
                return self.report_errors(session, f"While fetching {index_name}")

            if output_format == "json":
                self.print_json(index_to_dict(index))
            else:
                self.display_detail(index)
            return 0

        except Exception as e:
            return self.handle_error(e, "Failed to get index info")


# Typer command wrapper
def command(
    index_name: str = typer.Argument(..., help="Index name"),
    output_format: str = typer.Option(
        "table", "--format", "-f", help="Output format: table or json"
    ),
) -> None:
    """Show index details.

    Displays the description, document count and timestamps of an index.

    Examples:
        indexconsole index info RFP-2024
        indexconsole index info RFP-2024 --format json
    """
    cmd = InfoCommand()
    exit_code = cmd.execute(index_name, output_format)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
