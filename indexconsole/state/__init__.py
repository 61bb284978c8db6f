"""State containers owned by a console session.

- IndexRepository: snapshot of all indexes
- SelectionTracker: detail record of the inspected index
- ViewState: active tab, form values, error slot
- BusyGuard: per (command, name) re-entry guard
"""

from indexconsole.state.guard import BusyGuard, CommandBusy
from indexconsole.state.repository import IndexRepository
from indexconsole.state.selection import SelectionTracker
from indexconsole.state.view import (
    ActiveTab,
    CreateForm,
    ErrorSlot,
    UploadForm,
    ViewState,
)

__all__ = [
    "ActiveTab",
    "BusyGuard",
    "CommandBusy",
    "CreateForm",
    "ErrorSlot",
    "IndexRepository",
    "SelectionTracker",
    "UploadForm",
    "ViewState",
]
