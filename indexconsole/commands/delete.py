"""Delete Index handler."""

from __future__ import annotations

from typing import Any, Callable

from indexconsole.client.api import IndexServiceClient
from indexconsole.commands.base import CommandHandler, CommandResult
from indexconsole.core.exceptions import ValidationError
from indexconsole.state import BusyGuard, IndexRepository, SelectionTracker, ViewState

ConfirmFn = Callable[[str], bool]


def deny(prompt: str) -> bool:
    """Confirmation callback that declines every prompt."""
    return False


class DeleteIndexHandler(CommandHandler):
    """Delete an index after explicit confirmation.

    The delete is never forced: the service may refuse it (for example a
    non-empty index) and the refusal lands in the error slot with the list
    and the selection untouched.
    """

    command_name = "delete"

    def __init__(
        self,
        client: IndexServiceClient,
        repository: IndexRepository,
        selection: SelectionTracker,
        view: ViewState,
        guard: BusyGuard,
        confirm: ConfirmFn = deny,
    ) -> None:
        super().__init__(client, repository, selection, view, guard)
        self.confirm = confirm

    async def run(self, name: str) -> CommandResult:
        return await self.invoke(name or "")

    def validate(self, target: str, **params: Any) -> None:
        if not target:
            raise ValidationError("Index name is required.", field="name")

    def approve(self, target: str) -> bool:
        return bool(self.confirm(f'Delete index "{target}"?'))

    async def call_service(self, target: str, **params: Any) -> None:
        await self.client.delete_index(target, force=False)

        # Detail of a deleted index is never shown, even if the refresh fails.
        if self.selection.is_selected(target) or self.selection.pending_name == target:
            self.selection.clear()

    async def refresh_state(self, target: str, **params: Any) -> None:
        await self.repository.refresh()
