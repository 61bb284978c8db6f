"""
Busy guard keyed on (command, index name).

Stands in for a disabled button: while a handler for ``("delete", "A")``
is outstanding, a second trigger for the same pair is refused. Other
commands and other names are unaffected.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Set, Tuple

GuardKey = Tuple[str, str]


class CommandBusy(Exception):
    """Raised by claim() when the key is already held."""

    def __init__(self, command: str, name: str) -> None:
        super().__init__(f"'{command}' is already running for '{name}'")
        self.command = command
        self.name = name


class BusyGuard:
    """Set of (command, name) pairs currently in flight."""

    def __init__(self) -> None:
        self._held: Set[GuardKey] = set()

    def is_busy(self, command: str, name: str) -> bool:
        return (command, name) in self._held

    @property
    def held(self) -> Set[GuardKey]:
        """Snapshot of the keys currently held."""
        return set(self._held)

    @contextmanager
    def claim(self, command: str, name: str) -> Iterator[None]:
        """Hold the key for the duration of the block.

        Raises:
            CommandBusy: If the key is already held
        """
        key = (command, name)
        if key in self._held:
            raise CommandBusy(command, name)
        self._held.add(key)
        try:
            yield
        finally:
            self._held.discard(key)
