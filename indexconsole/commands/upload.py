"""Upload Document handler."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from indexconsole.commands.base import CommandHandler, CommandResult
from indexconsole.core.exceptions import ValidationError
from indexconsole.state import ActiveTab


def _optional(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


class UploadDocumentHandler(CommandHandler):
    """File one document under an index.

    After the upload both the list and the detail of the target index are
    fetched again, so the new ``document_count`` shows without a second
    action.
    """

    command_name = "upload"

    async def run(
        self,
        target_index: str,
        file: Optional[Path],
        document_name: Optional[str] = None,
        document_type: Optional[str] = None,
    ) -> CommandResult:
        return await self.invoke(
            target_index or "",
            file=file,
            document_name=_optional(document_name),
            document_type=_optional(document_type),
        )

    def validate(self, target: str, **params: Any) -> None:
        if not target:
            raise ValidationError("Target index name is required.", field="target_index")

        file = params.get("file")
        if file is None:
            raise ValidationError("Choose a file to upload.", field="file")
        if not Path(file).is_file():
            raise ValidationError(f"File not found: {file}", field="file")

    async def call_service(self, target: str, **params: Any) -> None:
        await self.client.upload_document(
            target,
            Path(params["file"]),
            document_name=params.get("document_name"),
            document_type=params.get("document_type"),
        )

    async def refresh_state(self, target: str, **params: Any) -> None:
        await self.repository.refresh()
        await self.selection.select(target)

    def settle_view(self, target: str) -> None:
        self.view.upload_form.reset()
        self.view.switch_to(ActiveTab.LIST)
