"""Static registry of analytical workflows and their parameter schemas.

The set of workflows is closed and fixed at import time. Each workflow declares
an ordered tuple of :class:`ParameterSpec`; workflows without inputs declare an
empty tuple, which is a valid state in its own right.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

ParameterValue = str | int | float

DATETIME_FORMAT = "%Y-%m-%dT%H:%M"


class WorkflowName(str, Enum):
    ANOMALY_DETECTION = "Anomaly Detection"
    POWER_FLOW_FORECAST = "Power Flow Forecast"
    RISK_ASSESSMENT = "Risk Assessment"
    DYNAMIC_TARIFF_EVALUATION = "Dynamic Tariff Evaluation"


class ParameterKind(str, Enum):
    NUMBER = "number"
    SELECT = "select"
    DATETIME = "datetime"


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parses_as_datetime(value: object) -> bool:
    if not isinstance(value, str):
        return False
    try:
        datetime.strptime(value, DATETIME_FORMAT)
    except ValueError:
        return False
    return True


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """Declaration of one workflow input.

    ``options`` is only meaningful for :attr:`ParameterKind.SELECT` and keeps
    the declared order.
    """

    name: str
    kind: ParameterKind
    default: ParameterValue
    options: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind is ParameterKind.NUMBER and not _is_number(self.default):
            raise ValueError(f"Parameter {self.name!r}: numeric default required")
        if self.kind is ParameterKind.SELECT:
            if not self.options:
                raise ValueError(f"Parameter {self.name!r}: select requires options")
            if self.default not in self.options:
                raise ValueError(f"Parameter {self.name!r}: default must be one of the options")
        elif self.options:
            raise ValueError(f"Parameter {self.name!r}: options are only valid for select")
        if self.kind is ParameterKind.DATETIME and not _parses_as_datetime(self.default):
            raise ValueError(f"Parameter {self.name!r}: default must match {DATETIME_FORMAT}")

    def to_json(self) -> dict[str, object]:
        out: dict[str, object] = {
            "name": self.name,
            "kind": self.kind.value,
            "default": self.default,
        }
        if self.options:
            out["options"] = list(self.options)
        return out


def is_valid_value(spec: ParameterSpec, value: object) -> bool:
    """Check a raw user value against the spec's kind without raising.

    Text input for numbers is accepted when it parses as a float.
    """

    if spec.kind is ParameterKind.NUMBER:
        if _is_number(value):
            return True
        if isinstance(value, str):
            try:
                float(value)
            except ValueError:
                return False
            return True
        return False
    if spec.kind is ParameterKind.SELECT:
        return value in spec.options
    return _parses_as_datetime(value)


def _build_catalog(
    entries: Mapping[WorkflowName, tuple[ParameterSpec, ...]],
) -> dict[WorkflowName, tuple[ParameterSpec, ...]]:
    missing = [w.value for w in WorkflowName if w not in entries]
    if missing:
        raise ValueError(f"Catalog is missing workflows: {', '.join(missing)}")
    for workflow, specs in entries.items():
        names = [s.name for s in specs]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate parameter names in {workflow.value!r}")
    return dict(entries)


# Evaluated once, so the default start time is stable for the process lifetime.
_PROCESS_START = datetime.now(tz=UTC).strftime(DATETIME_FORMAT)

CATALOG: dict[WorkflowName, tuple[ParameterSpec, ...]] = _build_catalog(
    {
        WorkflowName.ANOMALY_DETECTION: (
            ParameterSpec("PCA Dimensions", ParameterKind.NUMBER, 3),
            ParameterSpec("eps", ParameterKind.NUMBER, 0.5),
            ParameterSpec("min_samples", ParameterKind.NUMBER, 5),
        ),
        WorkflowName.POWER_FLOW_FORECAST: (
            ParameterSpec(
                "Method",
                ParameterKind.SELECT,
                "NN",
                options=("NN", "Ensemble", "Näive"),
            ),
            ParameterSpec("Forecast Horizon (hours)", ParameterKind.NUMBER, 24),
            ParameterSpec("Start Time", ParameterKind.DATETIME, _PROCESS_START),
        ),
        WorkflowName.RISK_ASSESSMENT: (),
        WorkflowName.DYNAMIC_TARIFF_EVALUATION: (),
    }
)


def list_workflows() -> tuple[WorkflowName, ...]:
    return tuple(WorkflowName)


def get_params(workflow: WorkflowName) -> tuple[ParameterSpec, ...]:
    return CATALOG[WorkflowName(workflow)]


def find_param(workflow: WorkflowName, name: str) -> ParameterSpec | None:
    for spec in get_params(workflow):
        if spec.name == name:
            return spec
    return None
