"""Config subcommands.

- show: Display the effective configuration
"""

from __future__ import annotations

import typer

from indexconsole.cli.config import show

# Create config subcommand application
app = typer.Typer(
    name="config",
    help="Configuration management",
    add_completion=False,
)

app.command("show")(show.command)


@app.callback()
def main() -> None:
    """Configuration management.

    Settings are read from indexconsole.yaml in the working directory (or
    --config PATH), then overridden by INDEXCONSOLE_BASE_URL,
    INDEXCONSOLE_TIMEOUT and INDEXCONSOLE_LOG_LEVEL, then by --base-url.
    """
    pass
