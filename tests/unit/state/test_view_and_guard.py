"""
GWT Unit Tests for view state and the busy guard.
"""

from pathlib import Path

import pytest

from indexconsole.core.exceptions import ValidationError
from indexconsole.state import ActiveTab, BusyGuard, CommandBusy, ViewState


# =============================================================================
# GIVEN: View state
# =============================================================================


def test_view_given_default_when_created_then_list_tab_and_empty_slot():
    view = ViewState()

    assert view.active_tab is ActiveTab.LIST
    assert not view.errors
    assert view.errors.error is None


def test_error_slot_given_existing_error_when_set_again_then_replaced():
    view = ViewState()
    first = ValidationError("first")
    second = ValidationError("second")

    view.errors.set(first)
    view.errors.set(second)

    assert view.errors.error is second
    view.errors.clear()
    assert not view.errors


def test_switch_to_given_tab_value_when_switched_then_enum_stored():
    view = ViewState()

    view.switch_to("upload")

    assert view.active_tab is ActiveTab.UPLOAD


def test_upload_form_given_filled_when_reset_then_target_index_kept():
    view = ViewState()
    form = view.upload_form
    form.target_index = "RFP-2024"
    form.file = Path("brief.pdf")
    form.document_name = "Brief"
    form.document_type = "rfp"

    form.reset()

    assert form.target_index == "RFP-2024"
    assert form.file is None
    assert form.document_name == ""
    assert form.document_type == ""


def test_create_form_given_filled_when_reset_then_all_fields_empty():
    view = ViewState()
    view.create_form.name = "A"
    view.create_form.description = "desc"

    view.create_form.reset()

    assert view.create_form.name == ""
    assert view.create_form.description == ""


# =============================================================================
# GIVEN: Busy guard
# =============================================================================


def test_guard_given_claimed_key_when_claimed_again_then_command_busy():
    guard = BusyGuard()

    with guard.claim("delete", "A"):
        assert guard.is_busy("delete", "A")
        with pytest.raises(CommandBusy):
            with guard.claim("delete", "A"):
                pass

    assert not guard.is_busy("delete", "A")


def test_guard_given_claimed_key_when_other_pairs_checked_then_not_busy():
    guard = BusyGuard()

    with guard.claim("delete", "A"):
        assert not guard.is_busy("delete", "B")
        assert not guard.is_busy("upload", "A")
        assert guard.held == {("delete", "A")}


def test_guard_given_error_inside_block_when_raised_then_key_released():
    guard = BusyGuard()

    with pytest.raises(RuntimeError):
        with guard.claim("create", "A"):
            raise RuntimeError("boom")

    assert guard.held == set()
