"""Unit tests for the workflow catalog."""

from __future__ import annotations

import pytest

from grid_workflow_console.workflow.catalog import (
    CATALOG,
    ParameterKind,
    ParameterSpec,
    WorkflowName,
    find_param,
    get_params,
    is_valid_value,
    list_workflows,
)


def test_catalog_covers_every_workflow_in_order() -> None:
    assert [w.value for w in list_workflows()] == [
        "Anomaly Detection",
        "Power Flow Forecast",
        "Risk Assessment",
        "Dynamic Tariff Evaluation",
    ]
    assert set(CATALOG) == set(WorkflowName)


def test_anomaly_detection_params_keep_declared_order() -> None:
    params = get_params(WorkflowName.ANOMALY_DETECTION)
    assert [(p.name, p.default) for p in params] == [
        ("PCA Dimensions", 3),
        ("eps", 0.5),
        ("min_samples", 5),
    ]


def test_forecast_method_is_a_select_with_nn_default() -> None:
    method = find_param(WorkflowName.POWER_FLOW_FORECAST, "Method")
    assert method is not None
    assert method.kind is ParameterKind.SELECT
    assert method.options == ("NN", "Ensemble", "Näive")
    assert method.default == "NN"


def test_workflows_without_parameters_return_empty_sequence() -> None:
    assert get_params(WorkflowName.RISK_ASSESSMENT) == ()
    assert get_params(WorkflowName.DYNAMIC_TARIFF_EVALUATION) == ()


def test_get_params_accepts_string_value() -> None:
    assert get_params("Anomaly Detection") == get_params(WorkflowName.ANOMALY_DETECTION)  # type: ignore[arg-type]


def test_every_default_satisfies_its_kind() -> None:
    for specs in CATALOG.values():
        for spec in specs:
            assert is_valid_value(spec, spec.default)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "n", "kind": ParameterKind.NUMBER, "default": "three"},
        {"name": "n", "kind": ParameterKind.NUMBER, "default": True},
        {"name": "m", "kind": ParameterKind.SELECT, "default": "X", "options": ("A", "B")},
        {"name": "m", "kind": ParameterKind.SELECT, "default": "A"},
        {"name": "t", "kind": ParameterKind.DATETIME, "default": "yesterday"},
        {"name": "n", "kind": ParameterKind.NUMBER, "default": 1, "options": ("1",)},
    ],
)
def test_parameter_spec_rejects_defaults_outside_kind(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        ParameterSpec(**kwargs)  # type: ignore[arg-type]


def test_is_valid_value_never_raises_on_bad_input() -> None:
    eps = find_param(WorkflowName.ANOMALY_DETECTION, "eps")
    start = find_param(WorkflowName.POWER_FLOW_FORECAST, "Start Time")
    assert eps is not None and start is not None

    assert is_valid_value(eps, "0.3")
    assert not is_valid_value(eps, "abc")
    assert is_valid_value(start, "2024-05-01T12:30")
    assert not is_valid_value(start, 12)
