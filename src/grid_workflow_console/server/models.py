"""Pydantic models for the display adapter."""

from __future__ import annotations

from pydantic import BaseModel, Field

from grid_workflow_console.workflow.catalog import ParameterValue


class ApiParameterSpec(BaseModel):
    name: str
    kind: str
    default: ParameterValue
    options: list[str] = Field(default_factory=list)


class ApiWorkflow(BaseModel):
    name: str
    parameters: list[ApiParameterSpec]


class ApiParameterState(ApiParameterSpec):
    value: ParameterValue | None = None
    effectiveValue: ParameterValue
    valid: bool


class ApiSession(BaseModel):
    activeWorkflow: str | None
    parameters: list[ApiParameterState]
    phase: str
    runId: int | None
    isRunning: bool


class SelectRequest(BaseModel):
    workflow: str


class ParameterUpdate(BaseModel):
    value: ParameterValue


class RunStarted(BaseModel):
    runId: int
    workflow: str
