"""Rendering of the state containers.

Pure functions from state to rich renderables; nothing here mutates state.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table

from indexconsole.core.config import DEFAULT_DATE_FORMAT
from indexconsole.core.models import Index
from indexconsole.state import ActiveTab, IndexRepository, SelectionTracker, ViewState

PLACEHOLDER = "-"


def format_timestamp(value: Optional[datetime], date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a server timestamp for display, in local time."""
    if value is None:
        return PLACEHOLDER
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(date_format)


def index_to_dict(index: Index) -> Dict[str, Any]:
    """JSON-ready view of an index record."""
    return index.model_dump(mode="json")


def build_index_table(
    indexes: Sequence[Index],
    date_format: str = DEFAULT_DATE_FORMAT,
    loading: bool = False,
) -> RenderableType:
    """Table of indexes, or a panel when there is nothing to show."""
    if not indexes and not loading:
        return Panel("No indexes found", border_style="yellow", title="Indexes (0)")

    table = Table(title=f"Indexes ({len(indexes)})")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Documents", style="green", justify="right")
    table.add_column("Created", style="dim")

    for index in indexes:
        table.add_row(
            index.name,
            index.description or PLACEHOLDER,
            str(index.document_count),
            format_timestamp(index.created_at, date_format),
        )

    if loading:
        table.add_row("[dim]loading...[/dim]", "", "", "")

    return table


def build_repository_view(
    repository: IndexRepository, date_format: str = DEFAULT_DATE_FORMAT
) -> RenderableType:
    return build_index_table(repository.indexes, date_format, loading=repository.loading)


def build_detail_panel(
    index: Index, date_format: str = DEFAULT_DATE_FORMAT
) -> RenderableType:
    """Detail pane for the selected index."""
    lines = [
        f"[cyan]Name:[/cyan] {index.name}",
        f"[cyan]Description:[/cyan] {index.description or PLACEHOLDER}",
        f"[cyan]Documents:[/cyan] {index.document_count}",
        "",
        f"[cyan]Created:[/cyan] {format_timestamp(index.created_at, date_format)}",
        f"[cyan]Last updated:[/cyan] {format_timestamp(index.updated_at, date_format)}",
    ]
    return Panel("\n".join(lines), title="Index details", border_style="cyan")


def build_selection_view(
    selection: SelectionTracker, date_format: str = DEFAULT_DATE_FORMAT
) -> Optional[RenderableType]:
    """Detail pane, a loading line, or None when nothing is selected."""
    if selection.loading:
        return Panel(
            f"[dim]Loading {selection.pending_name}...[/dim]",
            title="Index details",
            border_style="dim",
        )
    if selection.current is None:
        return None
    return build_detail_panel(selection.current, date_format)


def build_form_panel(view: ViewState) -> Optional[RenderableType]:
    """Current values of the active tab's form, or None on the list tab."""
    if view.active_tab is ActiveTab.CREATE:
        form = view.create_form
        lines = [
            f"[cyan]name *:[/cyan] {form.name or PLACEHOLDER}",
            f"[cyan]description:[/cyan] {form.description or PLACEHOLDER}",
        ]
        title = "Create index"
    elif view.active_tab is ActiveTab.UPLOAD:
        form = view.upload_form
        lines = [
            f"[cyan]index *:[/cyan] {form.target_index or PLACEHOLDER}",
            f"[cyan]file *:[/cyan] {form.file or PLACEHOLDER}",
            f"[cyan]name:[/cyan] {form.document_name or PLACEHOLDER}",
            f"[cyan]type:[/cyan] {form.document_type or PLACEHOLDER}",
        ]
        title = "Upload document"
    else:
        return None
    return Panel("\n".join(lines), title=title, border_style="blue")
