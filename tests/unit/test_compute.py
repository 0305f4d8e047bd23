"""Unit tests for canned result synthesis."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from grid_workflow_console.workflow.catalog import WorkflowName
from grid_workflow_console.workflow.compute import compute_result
from grid_workflow_console.workflow.results import (
    AnomalyResult,
    ForecastResult,
    RiskResult,
    TariffResult,
)


def test_risk_assessment_is_deterministic() -> None:
    first = compute_result(WorkflowName.RISK_ASSESSMENT, {})
    second = compute_result(WorkflowName.RISK_ASSESSMENT, {})

    assert isinstance(first, RiskResult)
    assert first == second
    assert first.overall == second.overall == "Medium"
    assert [r.asset for r in first.risks] == ["Transformer T1", "Feeder F3", "Line L7"]


def test_anomaly_summary_reflects_effective_values() -> None:
    result = compute_result(WorkflowName.ANOMALY_DETECTION, {"eps": 0.3})

    assert isinstance(result, AnomalyResult)
    assert "eps=0.3" in result.summary
    assert "PCA Dimensions=3" in result.summary
    assert "min_samples=5" in result.summary
    assert [a.score for a in result.anomalies] == [0.92, 0.87, 0.78]


def test_forecast_with_defaults_reports_fixed_metrics() -> None:
    result = compute_result(WorkflowName.POWER_FLOW_FORECAST, {})

    assert isinstance(result, ForecastResult)
    assert result.metrics.mae == 1.23
    assert result.summary.startswith("NN forecast over 24 h")
    assert [p.offset_hours for p in result.forecast] == [1, 2, 3, 4, 5, 6]


def test_forecast_summary_with_explicit_start_time() -> None:
    result = compute_result(
        WorkflowName.POWER_FLOW_FORECAST,
        {"Method": "Ensemble", "Forecast Horizon (hours)": 48, "Start Time": "2024-05-01T06:00"},
    )
    assert result.summary == "Ensemble forecast over 48 h starting 2024-05-01T06:00"


def test_uncoercible_input_is_formatted_not_rejected() -> None:
    result = compute_result(
        WorkflowName.POWER_FLOW_FORECAST,
        {"Forecast Horizon (hours)": "soon", "Start Time": "garbage"},
    )
    assert "over soon h starting garbage" in result.summary


def test_tariff_payload_keeps_period_order() -> None:
    result = compute_result(WorkflowName.DYNAMIC_TARIFF_EVALUATION, {})

    assert isinstance(result, TariffResult)
    assert [t.period for t in result.tariffs] == [
        "00:00-06:00",
        "06:00-17:00",
        "17:00-21:00",
        "21:00-24:00",
    ]


def test_results_are_immutable() -> None:
    result = compute_result(WorkflowName.RISK_ASSESSMENT, {})
    with pytest.raises(ValidationError):
        result.overall = "Low"  # type: ignore[misc]
