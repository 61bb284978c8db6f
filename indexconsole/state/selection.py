"""
Selection Tracker - detail record of the index being inspected.

The detail record is fetched by name with ``GET /indexes/{name}``,
separately from the repository's list. It is a different object from the
list entry and is invalidated on its own: clear() after the index is
deleted, select() again after it changes.
"""

from __future__ import annotations

from typing import Optional

from indexconsole.client.api import IndexServiceClient
from indexconsole.core.logging import get_logger
from indexconsole.core.models import Index

logger = get_logger(__name__)


class SelectionTracker:
    """Holds the currently inspected index."""

    def __init__(self, client: IndexServiceClient) -> None:
        self._client = client
        self._current: Optional[Index] = None
        self._pending_name: Optional[str] = None
        self._generation = 0
        self._in_flight = 0

    @property
    def current(self) -> Optional[Index]:
        """The last successfully fetched detail record."""
        return self._current

    @property
    def selected_name(self) -> Optional[str]:
        return self._current.name if self._current else None

    @property
    def loading(self) -> bool:
        """True while a select() is in flight. Independent of the list."""
        return self._in_flight > 0

    @property
    def pending_name(self) -> Optional[str]:
        """Name requested by the latest select() still in flight."""
        return self._pending_name if self.loading else None

    def is_selected(self, name: str) -> bool:
        return self._current is not None and self._current.name == name

    async def select(self, name: str) -> Index:
        """Fetch an index's detail and make it the current selection.

        The previous record is replaced only on success.

        Raises:
            NotFoundError: If the service has no index with this name
            IndexConsoleError: Any other client failure
        """
        self._generation += 1
        generation = self._generation
        self._in_flight += 1
        self._pending_name = name

        try:
            index = await self._client.get_index(name)
        finally:
            self._in_flight -= 1

        if generation != self._generation:
            logger.debug("Dropping superseded selection", index=name)
            return index

        self._current = index
        logger.debug("Selected index", index=name, documents=index.document_count)
        return index

    def clear(self) -> None:
        """Drop the current record and any select() still in flight."""
        if self._current is not None:
            logger.debug("Clearing selection", index=self._current.name)
        self._current = None
        self._generation += 1
