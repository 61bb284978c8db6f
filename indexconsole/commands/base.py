"""
Base class for command handlers.

A handler runs one user-triggered mutation as a fixed sequence:

    Idle -> Validating -> Calling -> Refreshing -> Idle
               |             |           |
               +-------------+-----------+--> Idle + error slot

Every await happens inside that sequence, and the view is only reset
after the refresh step has completed, so a partially applied command is
never reported as a success.

Subclasses implement the steps; run() in each subclass collects its
arguments and delegates to invoke().
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional

from indexconsole.client.api import IndexServiceClient
from indexconsole.core.exceptions import IndexConsoleError
from indexconsole.core.logging import get_logger
from indexconsole.state import BusyGuard, IndexRepository, SelectionTracker, ViewState

logger = get_logger(__name__)


class HandlerPhase(str, Enum):
    """Where one invocation currently is."""

    IDLE = "idle"
    VALIDATING = "validating"
    CALLING = "calling"
    REFRESHING = "refreshing"


class CommandStatus(str, Enum):
    """How an invocation ended."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"
    SKIPPED = "skipped"


@dataclass
class CommandResult:
    """Outcome of one handler invocation.

    ``error`` is the exception written to the error slot when the
    status is FAILED.
    """

    command: str
    index_name: str
    status: CommandStatus
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.status is CommandStatus.SUCCEEDED


class CommandHandler(ABC):
    """Shared protocol of the create, delete and upload handlers."""

    command_name: ClassVar[str] = ""

    def __init__(
        self,
        client: IndexServiceClient,
        repository: IndexRepository,
        selection: SelectionTracker,
        view: ViewState,
        guard: BusyGuard,
    ) -> None:
        self.client = client
        self.repository = repository
        self.selection = selection
        self.view = view
        self.guard = guard
        self._phases: Dict[str, HandlerPhase] = {}

    def phase(self, index_name: str) -> HandlerPhase:
        """Current phase of the invocation targeting ``index_name``."""
        return self._phases.get(index_name, HandlerPhase.IDLE)

    def is_busy(self, index_name: str) -> bool:
        """True when a trigger for this name would be ignored."""
        return self.guard.is_busy(self.command_name, index_name.strip())

    # === Steps ===

    @abstractmethod
    def validate(self, target: str, **params: Any) -> None:
        """Raise ValidationError when a required field is missing."""

    def approve(self, target: str) -> bool:
        """Gate between validation and the service call."""
        return True

    @abstractmethod
    async def call_service(self, target: str, **params: Any) -> None:
        """Issue the mutating request."""

    @abstractmethod
    async def refresh_state(self, target: str, **params: Any) -> None:
        """Bring the repository (and selection) up to date."""

    def settle_view(self, target: str) -> None:
        """Reset view state after a fully successful run."""

    # === Protocol ===

    async def invoke(self, target: str, **params: Any) -> CommandResult:
        """Run the steps for one target under the busy guard."""
        target = target.strip()

        if self.guard.is_busy(self.command_name, target):
            logger.info("Ignoring trigger while busy", command=self.command_name, index=target)
            return self._result(target, CommandStatus.SKIPPED)

        with self.guard.claim(self.command_name, target):
            try:
                self._enter(target, HandlerPhase.VALIDATING)
                self.validate(target, **params)

                if not self.approve(target):
                    logger.info("Cancelled by user", command=self.command_name, index=target)
                    return self._result(target, CommandStatus.CANCELLED)

                self._enter(target, HandlerPhase.CALLING)
                await self.call_service(target, **params)

                self._enter(target, HandlerPhase.REFRESHING)
                await self.refresh_state(target, **params)
            except IndexConsoleError as e:
                return self._fail(target, e)
            except Exception as e:
                logger.exception("Unexpected handler failure", command=self.command_name)
                return self._fail(target, e)
            finally:
                self._enter(target, HandlerPhase.IDLE)

        self.view.errors.clear()
        self.settle_view(target)
        logger.info("Command succeeded", command=self.command_name, index=target)
        return self._result(target, CommandStatus.SUCCEEDED)

    def _enter(self, target: str, phase: HandlerPhase) -> None:
        logger.debug("Phase", command=self.command_name, index=target, phase=phase.value)
        if phase is HandlerPhase.IDLE:
            self._phases.pop(target, None)
        else:
            self._phases[target] = phase

    def _fail(self, target: str, error: BaseException) -> CommandResult:
        self.view.errors.set(error)
        logger.info(
            "Command failed",
            command=self.command_name,
            index=target,
            error=type(error).__name__,
        )
        return self._result(target, CommandStatus.FAILED, error)

    def _result(
        self,
        target: str,
        status: CommandStatus,
        error: Optional[BaseException] = None,
    ) -> CommandResult:
        return CommandResult(self.command_name, target, status, error)
