"""
View State - UI-only state shared by the handlers and the presentation.

Holds the active tab, the create and upload form values, and the single
error slot. Nothing here talks to the service.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class ActiveTab(str, Enum):
    """Console tabs."""

    LIST = "list"
    CREATE = "create"
    UPLOAD = "upload"


class ErrorSlot:
    """
    The one user-visible error.

    set() replaces any previous error; clear() empties the slot.
    Formatting into text is left to the presentation layer.
    """

    def __init__(self) -> None:
        self._error: Optional[BaseException] = None

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    def set(self, error: BaseException) -> None:
        self._error = error

    def clear(self) -> None:
        self._error = None

    def __bool__(self) -> bool:
        return self._error is not None


@dataclass
class CreateForm:
    """Fields of the create-index form."""

    name: str = ""
    description: str = ""

    def reset(self) -> None:
        self.name = ""
        self.description = ""


@dataclass
class UploadForm:
    """Fields of the upload-document form.

    Empty ``document_name`` / ``document_type`` mean "not provided".
    """

    target_index: str = ""
    file: Optional[Path] = None
    document_name: str = ""
    document_type: str = ""

    def reset(self) -> None:
        """Clear everything except the target index."""
        self.file = None
        self.document_name = ""
        self.document_type = ""


@dataclass
class ViewState:
    """All UI-only state of one console session."""

    active_tab: ActiveTab = ActiveTab.LIST
    create_form: CreateForm = field(default_factory=CreateForm)
    upload_form: UploadForm = field(default_factory=UploadForm)
    errors: ErrorSlot = field(default_factory=ErrorSlot)

    def switch_to(self, tab: ActiveTab) -> None:
        self.active_tab = ActiveTab(tab)
