"""Executors compute a workflow result from a parameter snapshot."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping

from grid_workflow_console.workflow.catalog import ParameterValue, WorkflowName
from grid_workflow_console.workflow.compute import compute_result
from grid_workflow_console.workflow.results import Result

logger = logging.getLogger(__name__)


class WorkflowExecutor(ABC):
    """Abstract base class for workflow executors.

    The execution controller calls :meth:`execute` from its deferred
    completion, after the run's latency has elapsed. A backend-backed executor
    replaces the mock without changing the controller.
    """

    @abstractmethod
    def execute(self, workflow: WorkflowName, params: Mapping[str, ParameterValue]) -> Result:
        """Produce the result for one run.

        Args:
            workflow: The workflow the run targets.
            params: Parameter snapshot taken when the run started.

        Returns:
            The workflow's result.

        Raises:
            ExecutionFailed: If the run cannot produce a result.
        """
        pass


class MockWorkflowExecutor(WorkflowExecutor):
    """Returns canned, deterministic output for every workflow."""

    def execute(self, workflow: WorkflowName, params: Mapping[str, ParameterValue]) -> Result:
        logger.debug("Computing mock result", extra={"workflow": workflow.value})
        return compute_result(workflow, params)


class ExecutorFactory:
    """Factory for creating executor instances."""

    @staticmethod
    def create(name: str) -> WorkflowExecutor:
        """Create an executor by configured name.

        Raises:
            ValueError: If the executor name is not supported.
        """
        logger.info(f"Creating workflow executor: {name}")

        if name == "mock":
            return MockWorkflowExecutor()
        raise ValueError(f"Unsupported workflow executor: {name}")
