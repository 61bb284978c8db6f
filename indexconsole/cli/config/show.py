"""Show command - Display the effective configuration.

Prints the configuration after defaults, the YAML file, environment
variables and command-line flags have been layered.
"""

from __future__ import annotations

import json

import typer
from rich.table import Table

from indexconsole.cli.core.command_base import IndexConsoleCommand
from indexconsole.core.config import ConsoleConfig


class ShowCommand(IndexConsoleCommand):
    """Display current configuration."""

    def execute(self, format: str = "table") -> int:
        """Show configuration.

        Args:
            format: Output format (table/json)

        Returns:
            0 on success, 1 on error
        """
        try:
            config = self.load_config()

            if format == "json":
                self.console.print_json(json.dumps(config.to_dict()))
            elif format == "table":
                self._show_table(config)
            else:
                self.print_error(f"Unknown format: {format}")
                return 1
            return 0

        except Exception as e:
            return self.handle_error(e, "Failed to show configuration")

    def _show_table(self, config: ConsoleConfig) -> None:
        table = Table(title="Configuration")
        table.add_column("Key", style="cyan")
        table.add_column("Value")

        for section, values in config.to_dict().items():
            for key, value in values.items():
                table.add_row(f"{section}.{key}", "-" if value is None else str(value))

        self.console.print(table)


# Typer command wrapper
def command(
    format: str = typer.Option("table", "--format", "-f", help="Output format: table or json"),
) -> None:
    """Display the effective configuration.

    Examples:
        indexconsole config show
        indexconsole --base-url http://indexer:5278 config show --format json
    """
    cmd = ShowCommand()
    exit_code = cmd.execute(format)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
