"""Workflow console core.

- catalog: the closed set of workflows and their parameter specs
- parameters: per-session parameter values
- execution: the run state machine with stale-completion guarding
- session: selection controller tying the above together
- render: pure projection of execution state for display
"""

__all__: list[str] = []
