"""Result models produced by workflow runs.

``Result`` is a closed union discriminated by ``kind``. Models are frozen and
payloads are tuples, so a result cannot change after it is produced.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class AnomalyRecord(_Frozen):
    timestamp: str
    score: float
    feature: str


class AnomalyResult(_Frozen):
    kind: Literal["anomaly"] = "anomaly"
    summary: str
    anomalies: tuple[AnomalyRecord, ...]


class ForecastPoint(_Frozen):
    offset_hours: int
    predicted_kw: float
    lower_kw: float
    upper_kw: float


class ForecastMetrics(_Frozen):
    mae: float
    rmse: float


class ForecastResult(_Frozen):
    kind: Literal["forecast"] = "forecast"
    summary: str
    forecast: tuple[ForecastPoint, ...]
    metrics: ForecastMetrics


RiskLevel = Literal["Low", "Medium", "High"]


class RiskRecord(_Frozen):
    asset: str
    hazard: str
    level: RiskLevel
    probability: float


class RiskResult(_Frozen):
    kind: Literal["risk"] = "risk"
    summary: str
    overall: RiskLevel
    risks: tuple[RiskRecord, ...]


class TariffRecord(_Frozen):
    period: str
    tier: str
    price_eur_per_kwh: float


class TariffResult(_Frozen):
    kind: Literal["tariff"] = "tariff"
    summary: str
    tariffs: tuple[TariffRecord, ...]
    estimated_savings_percent: float


Result = Annotated[
    AnomalyResult | ForecastResult | RiskResult | TariffResult,
    Field(discriminator="kind"),
]

result_adapter: TypeAdapter[Result] = TypeAdapter(Result)
