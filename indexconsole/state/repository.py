"""
Index Repository - client-side cache of all indexes.

The cache holds the last complete snapshot returned by ``GET /indexes/``.
refresh() replaces the snapshot wholesale; there is no merging and no
local synthesis of records, so the cache is always either empty (before
the first load) or exactly one server response.

State Model
-----------
    indexes   immutable tuple, swapped in one assignment
    loading   True while at least one refresh is in flight
    loaded    True once a snapshot has been published

Only the most recently started refresh may publish. If an older refresh
completes after a newer one was started, its payload is dropped.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterator, List, Optional, Tuple

from indexconsole.client.api import IndexServiceClient
from indexconsole.core.logging import get_logger
from indexconsole.core.models import Index

logger = get_logger(__name__)


class IndexRepository:
    """In-memory snapshot of the service's index collection."""

    def __init__(self, client: IndexServiceClient) -> None:
        self._client = client
        self._indexes: Tuple[Index, ...] = ()
        self._loaded = False
        self._generation = 0
        self._in_flight = 0
        self.last_refreshed_at: Optional[datetime] = None

    # === Read access ===

    @property
    def indexes(self) -> Tuple[Index, ...]:
        """The last published snapshot."""
        return self._indexes

    @property
    def loading(self) -> bool:
        """True while a refresh is in flight."""
        return self._in_flight > 0

    @property
    def loaded(self) -> bool:
        """True once at least one refresh has succeeded."""
        return self._loaded

    def get(self, name: str) -> Optional[Index]:
        """Look up an index by name."""
        for index in self._indexes:
            if index.name == name:
                return index
        return None

    def names(self) -> List[str]:
        """Names in snapshot order."""
        return [index.name for index in self._indexes]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[Index]:
        return iter(self._indexes)

    def __len__(self) -> int:
        return len(self._indexes)

    # === Refresh ===

    async def refresh(self) -> Tuple[Index, ...]:
        """Fetch the full collection and replace the snapshot.

        Returns:
            The snapshot visible after the call

        Raises:
            IndexConsoleError: Any client failure; the snapshot is unchanged
        """
        self._generation += 1
        generation = self._generation
        self._in_flight += 1
        logger.debug("Refreshing index list", generation=generation)

        try:
            fetched = tuple(await self._client.list_indexes())
        finally:
            self._in_flight -= 1

        if generation != self._generation:
            logger.debug("Dropping superseded refresh", generation=generation)
            return self._indexes

        self._indexes = fetched
        self._loaded = True
        self.last_refreshed_at = datetime.now()
        logger.info("Index list refreshed", count=len(fetched))
        return fetched
