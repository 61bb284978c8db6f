"""Base class for index commands.

Provides shared display helpers for the index command group.
"""

from __future__ import annotations

import json
from typing import Any, List

from indexconsole.cli.core.command_base import IndexConsoleCommand
from indexconsole.cli.console import tip
from indexconsole.cli.render import (
    build_detail_panel,
    build_repository_view,
    index_to_dict,
)
from indexconsole.core.config import DEFAULT_DATE_FORMAT, ConsoleConfig
from indexconsole.core.models import Index
from indexconsole.session import ConsoleSession

OUTPUT_FORMATS = ("table", "json")


class IndexCommand(IndexConsoleCommand):
    """Base class for index commands."""

    date_format: str = DEFAULT_DATE_FORMAT

    def load_config(self) -> ConsoleConfig:
        config = super().load_config()
        self.date_format = config.display.date_format
        return config

    def display_indexes(self, session: ConsoleSession) -> None:
        """Print the repository snapshot as a table."""
        self.console.print()
        self.console.print(build_repository_view(session.repository, self.date_format))
        if not session.repository.indexes:
            tip("Create one with: indexconsole index create NAME")

    def display_detail(self, index: Index) -> None:
        self.console.print()
        self.console.print(build_detail_panel(index, self.date_format))

    def print_json(self, payload: Any) -> None:
        self.console.print_json(json.dumps(payload, ensure_ascii=False))

    def indexes_as_json(self, session: ConsoleSession) -> List[dict]:
        return [index_to_dict(index) for index in session.repository.indexes]
