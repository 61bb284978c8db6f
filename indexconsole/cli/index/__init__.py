"""Index command group - Index management operations.

Provides commands for managing indexes on the indexing service:
- list / refresh, info, create, delete, upload
"""

from __future__ import annotations

from indexconsole.cli.index.main import app as index_app

__all__ = ["index_app"]
