"""The console session: selection, parameters and execution in one object.

All mutable console state lives on a :class:`ConsoleSession`. Selecting (or
deselecting) a workflow is the single synchronization point: it empties the
parameter store and returns execution to ``Idle``, so nothing from a previous
workflow can surface under the new one.
"""

from __future__ import annotations

import logging

from grid_workflow_console.errors import InvalidSelection, UnknownParameter
from grid_workflow_console.workflow.catalog import (
    ParameterSpec,
    ParameterValue,
    WorkflowName,
    find_param,
    get_params,
)
from grid_workflow_console.workflow.execution import (
    DEFAULT_LATENCY_SECONDS,
    ExecutionController,
    ExecutionState,
)
from grid_workflow_console.workflow.executor import MockWorkflowExecutor, WorkflowExecutor
from grid_workflow_console.workflow.parameters import ParameterStore
from grid_workflow_console.workflow.render import DisplayModel, render
from grid_workflow_console.workflow.results import Result
from grid_workflow_console.workflow.scheduling import AsyncioScheduler, Scheduler

logger = logging.getLogger(__name__)


class ConsoleSession:
    def __init__(
        self,
        *,
        executor: WorkflowExecutor | None = None,
        scheduler: Scheduler | None = None,
        latency_seconds: float = DEFAULT_LATENCY_SECONDS,
    ) -> None:
        self._active: WorkflowName | None = None
        self._params = ParameterStore()
        self._execution = ExecutionController(
            executor=executor or MockWorkflowExecutor(),
            scheduler=scheduler or AsyncioScheduler(),
            latency_seconds=latency_seconds,
        )

    @property
    def active_workflow(self) -> WorkflowName | None:
        return self._active

    @property
    def parameter_specs(self) -> tuple[ParameterSpec, ...]:
        if self._active is None:
            return ()
        return get_params(self._active)

    @property
    def state(self) -> ExecutionState:
        return self._execution.state

    def select_workflow(self, name: WorkflowName | str) -> None:
        """Make ``name`` the active workflow and reset dependent state.

        Raises:
            ValueError: If ``name`` is not a known workflow.
        """

        workflow = WorkflowName(name)
        self._reset()
        self._active = workflow
        logger.info("Workflow selected", extra={"workflow": workflow.value})

    def deselect(self) -> None:
        self._reset()
        self._active = None
        logger.info("Workflow deselected")

    def set_value(self, name: str, value: ParameterValue) -> None:
        self._spec(name, operation="set a parameter")
        self._params.set_value(name, value)

    def effective_value(self, name: str) -> ParameterValue:
        spec = self._spec(name, operation="read a parameter")
        return self._params.effective_value(spec)

    def values(self) -> dict[str, ParameterValue]:
        """Explicitly entered values (defaults excluded)."""

        return self._params.snapshot()

    def run(self) -> int:
        """Start a run of the active workflow with a snapshot of current values.

        A run already in flight is superseded; its completion will be ignored.

        Returns:
            The id of the new run.

        Raises:
            InvalidSelection: If no workflow is selected.
        """

        if self._active is None:
            raise InvalidSelection("run a workflow")
        return self._execution.start(self._active, self._params.snapshot())

    def is_running(self) -> bool:
        return self._execution.is_running()

    def result(self) -> Result | None:
        return self._execution.result()

    def render(self) -> DisplayModel:
        return render(self._execution.state)

    def _reset(self) -> None:
        self._params.clear()
        self._execution.reset()

    def _spec(self, name: str, *, operation: str) -> ParameterSpec:
        if self._active is None:
            raise InvalidSelection(operation)
        spec = find_param(self._active, name)
        if spec is None:
            raise UnknownParameter(self._active.value, name)
        return spec
