"""Per-session parameter values for the active workflow."""

from __future__ import annotations

from grid_workflow_console.workflow.catalog import ParameterSpec, ParameterValue


class ParameterStore:
    """Holds user-entered values keyed by parameter name.

    Values are stored as entered. Nothing here checks them against the
    parameter kind; absent entries resolve to the spec default.
    """

    def __init__(self) -> None:
        self._values: dict[str, ParameterValue] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def set_value(self, name: str, value: ParameterValue) -> None:
        self._values[name] = value

    def effective_value(self, spec: ParameterSpec) -> ParameterValue:
        return self._values.get(spec.name, spec.default)

    def snapshot(self) -> dict[str, ParameterValue]:
        """Copy of the current entries, detached from later edits."""

        return dict(self._values)

    def clear(self) -> None:
        self._values.clear()
