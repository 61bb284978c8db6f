"""Create Index handler."""

from __future__ import annotations

from typing import Any, Optional

from indexconsole.commands.base import CommandHandler, CommandResult
from indexconsole.core.exceptions import ValidationError
from indexconsole.state import ActiveTab


class CreateIndexHandler(CommandHandler):
    """Create an index, then reload the list and return to it.

    On failure the create form keeps its values so the user can fix them.
    """

    command_name = "create"

    async def run(self, name: str, description: Optional[str] = None) -> CommandResult:
        return await self.invoke(name or "", description=description)

    def validate(self, target: str, **params: Any) -> None:
        if not target:
            raise ValidationError("Index name is required.", field="name")

    async def call_service(self, target: str, **params: Any) -> None:
        await self.client.create_index(target, params.get("description") or None)

    async def refresh_state(self, target: str, **params: Any) -> None:
        await self.repository.refresh()

    def settle_view(self, target: str) -> None:
        self.view.create_form.reset()
        self.view.switch_to(ActiveTab.LIST)
