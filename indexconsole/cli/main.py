"""IndexConsole CLI - Main application entry point.

Registers the command groups and handles the global options.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from indexconsole.cli.config import config_app
from indexconsole.cli.console import set_verbose_mode
from indexconsole.cli.core.initializers import CLIInitializer
from indexconsole.cli.index import index_app
from indexconsole.cli.interactive.shell import command as shell_command

# Create main Typer application
app = typer.Typer(
    name="indexconsole",
    help="Console for a remote document-indexing service",
    add_completion=True,
    pretty_exceptions_enable=True,
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to indexconsole.yaml"
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Indexing service URL (overrides config)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Debug logging and full tracebacks"
    ),
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
) -> None:
    """IndexConsole - manage indexes and documents on an indexing service."""
    if version:
        from indexconsole import __version__

        typer.echo(f"IndexConsole {__version__}")
        raise typer.Exit()

    CLIInitializer.set_global_options(config_path=config, base_url=base_url, verbose=verbose)
    set_verbose_mode(verbose)

    # If no command provided, show help
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


app.command("shell", rich_help_panel="Core")(shell_command)
app.add_typer(index_app, name="index", rich_help_panel="Core")
app.add_typer(config_app, name="config", rich_help_panel="System")


def cli_main() -> None:
    """Entry point for console_scripts.

    This function is called when running 'indexconsole' command.
    """
    app()


if __name__ == "__main__":
    cli_main()
