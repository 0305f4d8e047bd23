"""Pure projection of execution state into a display model.

One render function per result variant; ``_RESULT_RENDERERS`` must cover every
member of :data:`Result`. Rows keep payload order.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from grid_workflow_console.workflow.execution import (
    Completed,
    ExecutionState,
    Failed,
    Idle,
    Running,
)
from grid_workflow_console.workflow.results import (
    AnomalyResult,
    ForecastResult,
    Result,
    RiskLevel,
    RiskResult,
    TariffResult,
)

PLACEHOLDER_MESSAGE = "Select a workflow and run it to view algorithm output"

Tone = Literal["neutral", "info", "success", "warning", "danger"]


class DisplayKind(str, Enum):
    PLACEHOLDER = "placeholder"
    PENDING = "pending"
    TABLE = "table"
    ERROR = "error"


class Badge(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    tone: Tone = "neutral"


class DisplayModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: DisplayKind
    title: str
    message: str = ""
    columns: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()
    badges: tuple[Badge, ...] = ()


_RISK_TONES: dict[str, Tone] = {"Low": "success", "Medium": "warning", "High": "danger"}


def _risk_tone(level: RiskLevel) -> Tone:
    return _RISK_TONES.get(level, "neutral")


def _render_anomaly(result: AnomalyResult) -> DisplayModel:
    return DisplayModel(
        kind=DisplayKind.TABLE,
        title="Anomaly Detection",
        message=result.summary,
        columns=("Timestamp (UTC)", "Feature", "Score"),
        rows=tuple((a.timestamp, a.feature, f"{a.score:.2f}") for a in result.anomalies),
        badges=(Badge(label="Anomalies", value=str(len(result.anomalies)), tone="warning"),),
    )


def _render_forecast(result: ForecastResult) -> DisplayModel:
    return DisplayModel(
        kind=DisplayKind.TABLE,
        title="Power Flow Forecast",
        message=result.summary,
        columns=("Horizon", "Predicted [kW]", "Lower [kW]", "Upper [kW]"),
        rows=tuple(
            (
                f"+{p.offset_hours} h",
                f"{p.predicted_kw:.1f}",
                f"{p.lower_kw:.1f}",
                f"{p.upper_kw:.1f}",
            )
            for p in result.forecast
        ),
        badges=(
            Badge(label="MAE", value=f"{result.metrics.mae:.2f}", tone="info"),
            Badge(label="RMSE", value=f"{result.metrics.rmse:.2f}", tone="info"),
        ),
    )


def _render_risk(result: RiskResult) -> DisplayModel:
    return DisplayModel(
        kind=DisplayKind.TABLE,
        title="Risk Assessment",
        message=result.summary,
        columns=("Asset", "Hazard", "Level", "Probability"),
        rows=tuple(
            (r.asset, r.hazard, r.level, f"{r.probability:.0%}") for r in result.risks
        ),
        badges=(Badge(label="Overall", value=result.overall, tone=_risk_tone(result.overall)),),
    )


def _render_tariff(result: TariffResult) -> DisplayModel:
    return DisplayModel(
        kind=DisplayKind.TABLE,
        title="Dynamic Tariff Evaluation",
        message=result.summary,
        columns=("Period", "Tier", "Price [EUR/kWh]"),
        rows=tuple((t.period, t.tier, f"{t.price_eur_per_kwh:.2f}") for t in result.tariffs),
        badges=(
            Badge(
                label="Est. savings",
                value=f"{result.estimated_savings_percent:.1f}%",
                tone="success",
            ),
        ),
    )


_RESULT_RENDERERS: dict[type, Callable[..., DisplayModel]] = {
    AnomalyResult: _render_anomaly,
    ForecastResult: _render_forecast,
    RiskResult: _render_risk,
    TariffResult: _render_tariff,
}


def render_result(result: Result) -> DisplayModel:
    renderer = _RESULT_RENDERERS.get(type(result))
    if renderer is None:
        raise TypeError(f"No renderer for result type {type(result).__name__}")
    return renderer(result)


def render(state: ExecutionState) -> DisplayModel:
    if isinstance(state, Idle):
        return DisplayModel(
            kind=DisplayKind.PLACEHOLDER,
            title="Algorithm Output",
            message=PLACEHOLDER_MESSAGE,
        )
    if isinstance(state, Running):
        return DisplayModel(
            kind=DisplayKind.PENDING,
            title=state.workflow.value,
            message=f"Running {state.workflow.value}...",
        )
    if isinstance(state, Completed):
        return render_result(state.result)
    if isinstance(state, Failed):
        return DisplayModel(
            kind=DisplayKind.ERROR,
            title=state.workflow.value,
            message=state.reason,
            badges=(Badge(label="Status", value="Failed", tone="danger"),),
        )
    raise TypeError(f"Unknown execution state: {state!r}")
