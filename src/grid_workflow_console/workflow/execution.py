"""Run lifecycle: Idle -> Running -> Completed | Failed.

Every ``start`` gets a new, monotonically increasing run id. A deferred
completion carries the id it was scheduled with and only applies while that id
is still current, so completions from superseded runs (another workflow, or an
older run of the same workflow) are dropped without touching state.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from grid_workflow_console.errors import IllegalTransitionError
from grid_workflow_console.workflow.catalog import ParameterValue, WorkflowName
from grid_workflow_console.workflow.executor import WorkflowExecutor
from grid_workflow_console.workflow.results import Result
from grid_workflow_console.workflow.scheduling import Scheduler

logger = logging.getLogger(__name__)

DEFAULT_LATENCY_SECONDS = 1.5


class ExecutionPhase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


ALLOWED_TRANSITIONS: dict[ExecutionPhase, set[ExecutionPhase]] = {
    ExecutionPhase.IDLE: {ExecutionPhase.IDLE, ExecutionPhase.RUNNING},
    ExecutionPhase.RUNNING: {
        ExecutionPhase.IDLE,
        ExecutionPhase.RUNNING,
        ExecutionPhase.COMPLETED,
        ExecutionPhase.FAILED,
    },
    ExecutionPhase.COMPLETED: {ExecutionPhase.IDLE, ExecutionPhase.RUNNING},
    ExecutionPhase.FAILED: {ExecutionPhase.IDLE, ExecutionPhase.RUNNING},
}


@dataclass(frozen=True, slots=True)
class Idle:
    phase: ExecutionPhase = field(default=ExecutionPhase.IDLE, init=False)


@dataclass(frozen=True, slots=True)
class Running:
    run_id: int
    workflow: WorkflowName
    params: Mapping[str, ParameterValue]
    phase: ExecutionPhase = field(default=ExecutionPhase.RUNNING, init=False)


@dataclass(frozen=True, slots=True)
class Completed:
    run_id: int
    workflow: WorkflowName
    result: Result
    phase: ExecutionPhase = field(default=ExecutionPhase.COMPLETED, init=False)


@dataclass(frozen=True, slots=True)
class Failed:
    run_id: int
    workflow: WorkflowName
    reason: str
    phase: ExecutionPhase = field(default=ExecutionPhase.FAILED, init=False)


ExecutionState = Idle | Running | Completed | Failed


def transition(*, current: ExecutionState, to: ExecutionState) -> ExecutionState:
    allowed = ALLOWED_TRANSITIONS.get(current.phase, set())
    if to.phase not in allowed:
        raise IllegalTransitionError(
            f"Illegal transition: {current.phase.value} -> {to.phase.value}"
        )
    return to


class ExecutionController:
    """Owns the execution state of one console session."""

    def __init__(
        self,
        *,
        executor: WorkflowExecutor,
        scheduler: Scheduler,
        latency_seconds: float = DEFAULT_LATENCY_SECONDS,
    ) -> None:
        self._executor = executor
        self._scheduler = scheduler
        self._latency = latency_seconds
        self._run_ids = itertools.count(1)
        self._state: ExecutionState = Idle()

    @property
    def state(self) -> ExecutionState:
        return self._state

    @property
    def current_run_id(self) -> int | None:
        return getattr(self._state, "run_id", None)

    def is_running(self) -> bool:
        return isinstance(self._state, Running)

    def result(self) -> Result | None:
        if isinstance(self._state, Completed):
            return self._state.result
        return None

    def start(self, workflow: WorkflowName, params: Mapping[str, ParameterValue]) -> int:
        run_id = next(self._run_ids)
        snapshot = dict(params)
        self._state = transition(
            current=self._state,
            to=Running(run_id=run_id, workflow=workflow, params=snapshot),
        )
        logger.info(
            "Workflow run started",
            extra={"run_id": run_id, "workflow": workflow.value, "params": snapshot},
        )
        self._scheduler.call_later(self._latency, lambda: self._finish(run_id))
        return run_id

    def reset(self) -> None:
        if not isinstance(self._state, Idle):
            logger.debug("Execution reset", extra={"from_phase": self._state.phase.value})
        self._state = transition(current=self._state, to=Idle())

    def complete(self, run_id: int, result: Result) -> bool:
        running = self._pending(run_id)
        if running is None:
            return False
        self._state = transition(
            current=running,
            to=Completed(run_id=run_id, workflow=running.workflow, result=result),
        )
        logger.info(
            "Workflow run completed",
            extra={"run_id": run_id, "workflow": running.workflow.value},
        )
        return True

    def fail(self, run_id: int, reason: str) -> bool:
        running = self._pending(run_id)
        if running is None:
            return False
        self._state = transition(
            current=running,
            to=Failed(run_id=run_id, workflow=running.workflow, reason=reason),
        )
        logger.warning(
            "Workflow run failed",
            extra={"run_id": run_id, "workflow": running.workflow.value, "reason": reason},
        )
        return True

    def _pending(self, run_id: int) -> Running | None:
        state = self._state
        if isinstance(state, Running) and state.run_id == run_id:
            return state
        logger.debug(
            "Discarding stale completion",
            extra={"run_id": run_id, "current_run_id": self.current_run_id},
        )
        return None

    def _finish(self, run_id: int) -> None:
        running = self._pending(run_id)
        if running is None:
            return
        try:
            result = self._executor.execute(running.workflow, running.params)
        except Exception as e:
            logger.exception(
                "Workflow executor raised",
                extra={"run_id": run_id, "workflow": running.workflow.value},
            )
            self.fail(run_id, str(e))
            return
        self.complete(run_id, result)
