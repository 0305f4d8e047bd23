"""Canned result synthesis for the mock executor.

Each builder formats the snapshot's effective values into the summary and
returns a fixed illustrative payload. There is no randomness and no clock
access, so the same inputs always give the same result.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from grid_workflow_console.workflow.catalog import ParameterValue, WorkflowName, get_params
from grid_workflow_console.workflow.results import (
    AnomalyRecord,
    AnomalyResult,
    ForecastMetrics,
    ForecastPoint,
    ForecastResult,
    Result,
    RiskRecord,
    RiskResult,
    TariffRecord,
    TariffResult,
)

# Sensor readings at the transformer substation, 5-minute cadence.
_ANOMALIES: tuple[AnomalyRecord, ...] = (
    AnomalyRecord(timestamp="2022-11-15T04:13:20Z", score=0.92, feature="U_L3_avg"),
    AnomalyRecord(timestamp="2022-11-15T04:08:20Z", score=0.87, feature="EP_cons_L3"),
    AnomalyRecord(timestamp="2022-11-15T04:03:20Z", score=0.78, feature="EP_cons_L1"),
)

_FORECAST: tuple[ForecastPoint, ...] = (
    ForecastPoint(offset_hours=1, predicted_kw=41.2, lower_kw=39.6, upper_kw=42.8),
    ForecastPoint(offset_hours=2, predicted_kw=39.8, lower_kw=38.0, upper_kw=41.6),
    ForecastPoint(offset_hours=3, predicted_kw=38.5, lower_kw=36.4, upper_kw=40.6),
    ForecastPoint(offset_hours=4, predicted_kw=40.1, lower_kw=37.7, upper_kw=42.5),
    ForecastPoint(offset_hours=5, predicted_kw=44.7, lower_kw=42.0, upper_kw=47.4),
    ForecastPoint(offset_hours=6, predicted_kw=49.3, lower_kw=46.2, upper_kw=52.4),
)

_FORECAST_METRICS = ForecastMetrics(mae=1.23, rmse=1.57)

_RISKS: tuple[RiskRecord, ...] = (
    RiskRecord(asset="Transformer T1", hazard="Thermal overload", level="High", probability=0.34),
    RiskRecord(asset="Feeder F3", hazard="Undervoltage", level="Medium", probability=0.21),
    RiskRecord(asset="Line L7", hazard="Ampacity limit", level="Low", probability=0.08),
)

_TARIFFS: tuple[TariffRecord, ...] = (
    TariffRecord(period="00:00-06:00", tier="Off-peak", price_eur_per_kwh=0.18),
    TariffRecord(period="06:00-17:00", tier="Standard", price_eur_per_kwh=0.27),
    TariffRecord(period="17:00-21:00", tier="Peak", price_eur_per_kwh=0.41),
    TariffRecord(period="21:00-24:00", tier="Standard", price_eur_per_kwh=0.27),
)


def _fmt(value: ParameterValue) -> str:
    return str(value)


def _effective(workflow: WorkflowName, params: Mapping[str, ParameterValue]) -> dict[str, str]:
    return {spec.name: _fmt(params.get(spec.name, spec.default)) for spec in get_params(workflow)}


def _anomaly(params: dict[str, str]) -> AnomalyResult:
    settings = ", ".join(f"{name}={value}" for name, value in params.items())
    return AnomalyResult(
        summary=f"DBSCAN detected {len(_ANOMALIES)} anomalies ({settings})",
        anomalies=_ANOMALIES,
    )


def _forecast(params: dict[str, str]) -> ForecastResult:
    return ForecastResult(
        summary=(
            f"{params['Method']} forecast over {params['Forecast Horizon (hours)']} h "
            f"starting {params['Start Time']}"
        ),
        forecast=_FORECAST,
        metrics=_FORECAST_METRICS,
    )


def _risk(_params: dict[str, str]) -> RiskResult:
    return RiskResult(
        summary=f"Overall risk level: Medium ({len(_RISKS)} risks assessed)",
        overall="Medium",
        risks=_RISKS,
    )


def _tariff(_params: dict[str, str]) -> TariffResult:
    return TariffResult(
        summary=f"Time-of-use tariff with {len(_TARIFFS)} periods, est. savings 12.5%",
        tariffs=_TARIFFS,
        estimated_savings_percent=12.5,
    )


_BUILDERS: dict[WorkflowName, Callable[[dict[str, str]], Result]] = {
    WorkflowName.ANOMALY_DETECTION: _anomaly,
    WorkflowName.POWER_FLOW_FORECAST: _forecast,
    WorkflowName.RISK_ASSESSMENT: _risk,
    WorkflowName.DYNAMIC_TARIFF_EVALUATION: _tariff,
}


def compute_result(workflow: WorkflowName, params: Mapping[str, ParameterValue]) -> Result:
    workflow = WorkflowName(workflow)
    return _BUILDERS[workflow](_effective(workflow, params))
