"""
GWT Unit Tests for the create-index handler.
"""

import json

import pytest
import respx
from httpx import Response

from indexconsole.commands import CommandStatus, HandlerPhase
from indexconsole.core.exceptions import ApiError, ValidationError
from indexconsole.state import ActiveTab
from tests.fixtures.payloads import BASE_URL, make_index


# =============================================================================
# GIVEN: Invalid input
# =============================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   ", None])
async def test_create_given_blank_name_when_run_then_validation_error_and_no_request(
    session, name
):
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        result = await session.create.run(name)

    assert result.status is CommandStatus.FAILED
    assert isinstance(result.error, ValidationError)
    assert result.error.field == "name"
    assert session.view.errors.error is result.error
    assert mock.calls.call_count == 0


# =============================================================================
# GIVEN: The service accepts the index
# =============================================================================


@pytest.mark.asyncio
async def test_create_given_valid_name_when_run_then_list_refreshed_and_form_reset(session):
    session.view.switch_to(ActiveTab.CREATE)
    session.view.create_form.name = "RFP-2024"
    session.view.create_form.description = "cruise line"
    session.view.errors.set(ValidationError("stale"))

    with respx.mock(base_url=BASE_URL) as mock:
        post = mock.post("/indexes/").mock(
            return_value=Response(201, json=make_index("RFP-2024", 0, "cruise line"))
        )
        mock.get("/indexes/").mock(
            return_value=Response(200, json=[make_index("RFP-2024", 0, "cruise line")])
        )

        result = await session.submit_create()

    assert result.succeeded
    assert json.loads(post.calls.last.request.content) == {
        "name": "RFP-2024",
        "description": "cruise line",
    }
    assert session.repository.names() == ["RFP-2024"]
    assert session.view.create_form.name == ""
    assert session.view.create_form.description == ""
    assert session.view.active_tab is ActiveTab.LIST
    assert not session.view.errors


@pytest.mark.asyncio
async def test_create_given_padded_name_and_empty_description_when_run_then_trimmed_and_null(
    session,
):
    with respx.mock(base_url=BASE_URL) as mock:
        post = mock.post("/indexes/").mock(return_value=Response(201, json=make_index("A")))
        mock.get("/indexes/").mock(return_value=Response(200, json=[make_index("A")]))

        result = await session.create.run("  A  ", "")

    assert result.index_name == "A"
    assert json.loads(post.calls.last.request.content) == {"name": "A", "description": None}


@pytest.mark.asyncio
async def test_create_given_run_when_service_called_then_phase_is_calling(session):
    seen = []

    def _record(request):
        seen.append(session.create.phase("A"))
        return Response(201, json=make_index("A"))

    def _record_list(request):
        seen.append(session.create.phase("A"))
        return Response(200, json=[make_index("A")])

    with respx.mock(base_url=BASE_URL) as mock:
        mock.post("/indexes/").mock(side_effect=_record)
        mock.get("/indexes/").mock(side_effect=_record_list)

        await session.create.run("A")

    assert seen == [HandlerPhase.CALLING, HandlerPhase.REFRESHING]
    assert session.create.phase("A") is HandlerPhase.IDLE


# =============================================================================
# GIVEN: The service refuses the index
# =============================================================================


@pytest.mark.asyncio
async def test_create_given_duplicate_name_when_run_then_error_and_form_kept(session):
    session.view.switch_to(ActiveTab.CREATE)
    session.view.create_form.name = "RFP-2024"
    session.view.create_form.description = "again"

    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        mock.post("/indexes/").mock(return_value=Response(409, text="index already exists"))
        listing = mock.get("/indexes/")

        result = await session.submit_create()

    assert result.status is CommandStatus.FAILED
    assert isinstance(session.view.errors.error, ApiError)
    assert session.view.errors.error.status_code == 409
    assert session.view.create_form.name == "RFP-2024"
    assert session.view.create_form.description == "again"
    assert session.view.active_tab is ActiveTab.CREATE
    assert not listing.called


# =============================================================================
# GIVEN: The same command already running
# =============================================================================


@pytest.mark.asyncio
async def test_create_given_same_name_in_flight_when_triggered_then_skipped(session):
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        with session.guard.claim("create", "A"):
            assert session.create.is_busy(" A ")
            result = await session.create.run("A")

    assert result.status is CommandStatus.SKIPPED
    assert mock.calls.call_count == 0
    assert not session.view.errors
