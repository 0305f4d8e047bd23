"""Deferred callbacks for run completion.

The console is single-threaded: a run's completion is a callback scheduled
after a fixed latency on whatever loop drives the session. Callbacks are never
cancelled here; the execution controller ignores the ones that are stale.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Protocol


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> object: ...


class AsyncioScheduler:
    """Schedules callbacks on the running asyncio event loop.

    Must be used from code already running on the loop (e.g. an async request
    handler), so every state mutation stays on that loop.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = asyncio.get_running_loop()
        return loop.call_later(delay, callback)
