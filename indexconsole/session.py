"""
Console session - one client plus the state containers it feeds.

The session is the composition root: it builds the repository, the
selection tracker, the view state and the busy guard, and hands the same
instances to every handler. The presentation layer only talks to the
session.

Usage:
    async with open_session(config, confirm=typer.confirm) as session:
        await session.load()
        await session.create.run("RFP-2024", "cruise line")
        if session.view.errors:
            ...
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from indexconsole.client.api import IndexServiceClient
from indexconsole.commands import (
    CommandResult,
    ConfirmFn,
    CreateIndexHandler,
    DeleteIndexHandler,
    UploadDocumentHandler,
    deny,
)
from indexconsole.core.config import ConsoleConfig
from indexconsole.core.exceptions import IndexConsoleError, ValidationError
from indexconsole.core.logging import get_logger
from indexconsole.core.models import Index
from indexconsole.state import BusyGuard, IndexRepository, SelectionTracker, ViewState

logger = get_logger(__name__)


class ConsoleSession:
    """State and handlers for one console run."""

    def __init__(self, client: IndexServiceClient, confirm: ConfirmFn = deny) -> None:
        self.client = client
        self.repository = IndexRepository(client)
        self.selection = SelectionTracker(client)
        self.view = ViewState()
        self.guard = BusyGuard()

        parts = (client, self.repository, self.selection, self.view, self.guard)
        self.create = CreateIndexHandler(*parts)
        self.delete = DeleteIndexHandler(*parts, confirm=confirm)
        self.upload = UploadDocumentHandler(*parts)

    # === Read-only actions ===

    async def load(self) -> bool:
        """Load or reload the index list.

        Failures land in the error slot; the previous snapshot stays.

        Returns:
            True on success
        """
        try:
            await self.repository.refresh()
        except IndexConsoleError as e:
            self.view.errors.set(e)
            return False
        self.view.errors.clear()
        return True

    reload = load

    async def inspect(self, name: str) -> Optional[Index]:
        """Select an index for the detail pane.

        A failure (including NotFoundError) lands in the error slot and the
        previous detail record stays on screen.

        Returns:
            The fetched record, or None on failure
        """
        name = (name or "").strip()
        if not name:
            self.view.errors.set(ValidationError("Index name is required.", field="name"))
            return None
        try:
            index = await self.selection.select(name)
        except IndexConsoleError as e:
            self.view.errors.set(e)
            return None
        self.view.errors.clear()
        return index

    # === Form submission ===

    async def submit_create(self) -> CommandResult:
        """Run the create handler with the create form's values."""
        form = self.view.create_form
        return await self.create.run(form.name, form.description)

    async def submit_upload(self) -> CommandResult:
        """Run the upload handler with the upload form's values."""
        form = self.view.upload_form
        return await self.upload.run(
            form.target_index, form.file, form.document_name, form.document_type
        )


@asynccontextmanager
async def open_session(
    config: ConsoleConfig,
    confirm: ConfirmFn = deny,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncIterator[ConsoleSession]:
    """Create a session bound to the configured service and close it after use."""
    logger.debug("Opening session", base_url=config.service.base_url)
    async with IndexServiceClient(
        config.service.base_url,
        timeout_sec=config.service.timeout_sec,
        transport=transport,
    ) as client:
        yield ConsoleSession(client, confirm=confirm)
