"""
GWT Unit Tests for the console session.
"""

import httpx
import pytest
import respx
from httpx import Response

from indexconsole.core.config import ConsoleConfig, ServiceConfig
from indexconsole.core.exceptions import (
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    ValidationError,
)
from indexconsole.session import open_session
from tests.fixtures.payloads import BASE_URL, make_index


# =============================================================================
# GIVEN: Loading the list
# =============================================================================


@pytest.mark.asyncio
async def test_load_given_service_up_when_loaded_then_repository_filled_and_slot_cleared(
    session,
):
    session.view.errors.set(ValidationError("stale"))

    with respx.mock(base_url=BASE_URL) as mock:
        mock.get("/indexes/").mock(return_value=Response(200, json=[make_index("A")]))

        ok = await session.load()

    assert ok
    assert session.repository.names() == ["A"]
    assert not session.view.errors


@pytest.mark.asyncio
async def test_reload_given_service_down_when_reloaded_then_snapshot_kept_and_error_shown(
    session,
):
    with respx.mock(base_url=BASE_URL) as mock:
        mock.get("/indexes/").mock(
            side_effect=[
                Response(200, json=[make_index("A")]),
                httpx.ConnectError("refused"),
            ]
        )
        await session.load()

        ok = await session.reload()

    assert not ok
    assert session.repository.names() == ["A"]
    assert isinstance(session.view.errors.error, NetworkError)


@pytest.mark.asyncio
async def test_load_given_undecodable_json_body_when_loaded_then_error_recorded_not_raised(
    session,
):
    with respx.mock(base_url=BASE_URL) as mock:
        mock.get("/indexes/").mock(
            return_value=Response(
                200, content=b"[\xff\xfe]", headers={"content-type": "application/json"}
            )
        )

        ok = await session.load()

    assert not ok
    assert isinstance(session.view.errors.error, MalformedResponseError)


# =============================================================================
# GIVEN: Inspecting an index
# =============================================================================


@pytest.mark.asyncio
async def test_inspect_given_blank_name_when_inspected_then_validation_error(session):
    index = await session.inspect("  ")

    assert index is None
    assert isinstance(session.view.errors.error, ValidationError)


@pytest.mark.asyncio
async def test_inspect_given_missing_index_when_inspected_then_previous_detail_kept(session):
    with respx.mock(base_url=BASE_URL) as mock:
        mock.get("/indexes/A").mock(return_value=Response(200, json=make_index("A")))
        mock.get("/indexes/ghost").mock(return_value=Response(404, text="not found"))
        await session.inspect("A")

        index = await session.inspect("ghost")

    assert index is None
    assert session.selection.selected_name == "A"
    assert isinstance(session.view.errors.error, NotFoundError)


# =============================================================================
# GIVEN: A session opened from configuration
# =============================================================================


@pytest.mark.asyncio
async def test_open_session_given_config_when_opened_then_client_uses_base_url():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=[])

    config = ConsoleConfig(service=ServiceConfig(base_url="http://custom:9000"))

    async with open_session(config, transport=httpx.MockTransport(handler)) as session:
        await session.load()

    assert seen == ["http://custom:9000/indexes/"]
    assert session.repository.loaded
