"""Command handlers: one user-triggered mutation each.

- CreateIndexHandler: create, refresh, back to the list
- DeleteIndexHandler: confirm, delete, clear selection, refresh
- UploadDocumentHandler: upload, refresh, re-select the target
"""

from indexconsole.commands.base import (
    CommandHandler,
    CommandResult,
    CommandStatus,
    HandlerPhase,
)
from indexconsole.commands.create import CreateIndexHandler
from indexconsole.commands.delete import ConfirmFn, DeleteIndexHandler, deny
from indexconsole.commands.upload import UploadDocumentHandler

__all__ = [
    "CommandHandler",
    "CommandResult",
    "CommandStatus",
    "ConfirmFn",
    "CreateIndexHandler",
    "DeleteIndexHandler",
    "HandlerPhase",
    "UploadDocumentHandler",
    "deny",
]
