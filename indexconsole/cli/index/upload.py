"""Upload command - Upload a document into an index.

After a successful upload the index list is reloaded and the target index
is shown with its new document count.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from indexconsole.cli.core.progress import ProgressManager
from indexconsole.cli.index.base import IndexCommand
from indexconsole.commands import CommandResult


class UploadCommand(IndexCommand):
    """Upload one file into an index."""

    def execute(
        self,
        index_name: str,
        file_path: Path,
        document_name: Optional[str] = None,
        document_type: Optional[str] = None,
    ) -> int:
        try:
            outcome: dict[str, CommandResult] = {}

            async def _upload(session) -> None:
                outcome["result"] = await session.upload.run(
                    index_name, file_path, document_name, document_type
                )

            with ProgressManager.spinner(f"Uploading {file_path.name}..."):
                session = self.run_session(_upload)

            if not outcome["result"].succeeded:
                return self.report_errors(session, "While uploading document")

            self.print_success(f"Uploaded {file_path.name} to {index_name.strip()}")
            if session.selection.current is not None:
                self.display_detail(session.selection.current)
            return 0

        except Exception as e:
            return self.handle_error(e, "Failed to upload document")


# Typer command wrapper
def command(
    index_name: str = typer.Argument(..., help="Target index name"),
    file_path: Path = typer.Argument(..., help="File to upload"),
    document_name: Optional[str] = typer.Option(
        None, "--name", "-n", help="Document name (defaults to the file name)"
    ),
    document_type: Optional[str] = typer.Option(
        None, "--type", "-t", help="Document type (server default: other)"
    ),
) -> None:
    """Upload a document into an index.

    Examples:
        indexconsole index upload RFP-2024 ./brief.pdf
        indexconsole index upload RFP-2024 ./brief.pdf --name Brief --type rfp
    """
    cmd = UploadCommand()
    exit_code = cmd.execute(index_name, file_path, document_name, document_type)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
