"""Grid Workflow Console.

Core state machine for an operational-planning decision support console:
- a static catalog of analytical workflows and their typed parameters
- a per-session parameter store
- a run lifecycle with stale-completion guarding
- pure rendering of execution state into a display model
"""

__version__ = "0.1.0"

from grid_workflow_console.workflow.catalog import WorkflowName
from grid_workflow_console.workflow.session import ConsoleSession

__all__ = ["__version__", "ConsoleSession", "WorkflowName"]
