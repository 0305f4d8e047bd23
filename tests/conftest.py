"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from grid_workflow_console.workflow.session import ConsoleSession


class ManualScheduler:
    """Virtual clock: callbacks fire only when the test advances time."""

    def __init__(self) -> None:
        self.now = 0.0
        self._pending: list[tuple[float, int, Callable[[], None]]] = []
        self._seq = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    def call_later(self, delay: float, callback: Callable[[], None]) -> object:
        self._seq += 1
        entry = (self.now + delay, self._seq, callback)
        self._pending.append(entry)
        return entry

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = sorted(e for e in self._pending if e[0] <= target)
            if not due:
                break
            entry = due[0]
            self._pending.remove(entry)
            self.now = entry[0]
            entry[2]()
        self.now = target


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def session(scheduler: ManualScheduler) -> ConsoleSession:
    """A session on the virtual clock with the default 1.5 s latency."""
    return ConsoleSession(scheduler=scheduler)
