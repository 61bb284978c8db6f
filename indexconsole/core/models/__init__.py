"""Data models shared by the client, the state containers and the CLI."""

from indexconsole.core.models.index import (
    Index,
    IndexCreate,
    parse_index,
    parse_index_list,
)

__all__ = ["Index", "IndexCreate", "parse_index", "parse_index_list"]
