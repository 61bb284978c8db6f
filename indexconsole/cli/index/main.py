"""Index subcommands.

Provides tools for index management:
- list / refresh: List all indexes
- info: Show index details
- create: Create an index
- delete: Delete an empty index
- upload: Upload a document into an index
"""

from __future__ import annotations

import typer

from indexconsole.cli.index import create, delete, info, list as list_cmd, upload

# Create index subcommand application
app = typer.Typer(
    name="index",
    help="Index management",
    add_completion=False,
)

# Register index commands
app.command("list")(list_cmd.command)
app.command("refresh")(list_cmd.command)
app.command("info")(info.command)
app.command("create")(create.command)
app.command("delete")(delete.command)
app.command("upload")(upload.command)


@app.callback()
def main() -> None:
    """Index management for the indexing service.

    Examples:
        # List all indexes
        indexconsole index list

        # Show index details
        indexconsole index info RFP-2024

        # Create, fill, then delete
        indexconsole index create RFP-2024 -d "cruise line"
        indexconsole index upload RFP-2024 ./brief.pdf
        indexconsole index delete RFP-2024

    For help on specific commands:
        indexconsole index <command> --help
    """
    pass
