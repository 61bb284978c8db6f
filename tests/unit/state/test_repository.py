"""
GWT Unit Tests for the index repository.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from indexconsole.core.exceptions import ApiError, NetworkError
from indexconsole.state import IndexRepository
from tests.fixtures.fakes import GatedClient, index


def _client(*results):
    client = MagicMock()
    client.list_indexes = AsyncMock(side_effect=list(results))
    return client


# =============================================================================
# GIVEN: A fresh repository
# =============================================================================


def test_repository_given_no_refresh_when_read_then_empty_and_not_loaded():
    repo = IndexRepository(_client())

    assert repo.indexes == ()
    assert len(repo) == 0
    assert not repo.loaded
    assert not repo.loading
    assert repo.last_refreshed_at is None


# =============================================================================
# GIVEN: Successful refreshes
# =============================================================================


@pytest.mark.asyncio
async def test_refresh_given_two_payloads_when_refreshed_twice_then_cache_is_latest_only():
    repo = IndexRepository(_client([index("A"), index("B")], [index("C")]))

    await repo.refresh()
    assert repo.names() == ["A", "B"]

    await repo.refresh()

    assert repo.names() == ["C"]
    assert "A" not in repo
    assert repo.loaded
    assert repo.last_refreshed_at is not None


@pytest.mark.asyncio
async def test_refresh_given_empty_payload_when_refreshed_then_cache_emptied():
    repo = IndexRepository(_client([index("A")], []))
    await repo.refresh()

    snapshot = await repo.refresh()

    assert snapshot == ()
    assert repo.indexes == ()
    assert repo.loaded


@pytest.mark.asyncio
async def test_lookup_given_loaded_cache_when_get_then_finds_by_name():
    repo = IndexRepository(_client([index("A", 2), index("B")]))
    await repo.refresh()

    assert repo.get("A").document_count == 2
    assert repo.get("missing") is None
    assert "B" in repo
    assert 42 not in repo
    assert [i.name for i in repo] == ["A", "B"]


# =============================================================================
# GIVEN: Failing refreshes
# =============================================================================


@pytest.mark.asyncio
async def test_refresh_given_network_failure_when_refreshed_then_cache_unchanged():
    repo = IndexRepository(_client([index("A")], NetworkError("down")))
    await repo.refresh()
    before = repo.indexes

    with pytest.raises(NetworkError):
        await repo.refresh()

    assert repo.indexes == before
    assert not repo.loading


@pytest.mark.asyncio
async def test_refresh_given_failure_before_first_load_when_refreshed_then_still_not_loaded():
    repo = IndexRepository(_client(ApiError(500, "Internal Server Error")))

    with pytest.raises(ApiError):
        await repo.refresh()

    assert not repo.loaded
    assert repo.indexes == ()


# =============================================================================
# GIVEN: Overlapping refreshes
# =============================================================================


@pytest.mark.asyncio
async def test_refresh_given_request_in_flight_when_read_then_loading_and_old_snapshot():
    client = GatedClient()
    repo = IndexRepository(client)

    task = asyncio.create_task(repo.refresh())
    await asyncio.sleep(0)

    assert repo.loading
    assert repo.indexes == ()

    client.release(0, [index("A")])
    await task

    assert not repo.loading
    assert repo.names() == ["A"]


@pytest.mark.asyncio
async def test_refresh_given_older_call_finishes_last_when_both_done_then_newer_payload_wins():
    client = GatedClient()
    repo = IndexRepository(client)

    older = asyncio.create_task(repo.refresh())
    await asyncio.sleep(0)
    newer = asyncio.create_task(repo.refresh())
    await asyncio.sleep(0)

    client.release(1, [index("new")])
    await newer
    client.release(0, [index("old")])
    result = await older

    assert repo.names() == ["new"]
    assert [i.name for i in result] == ["new"]
    assert not repo.loading
