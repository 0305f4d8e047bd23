"""Configuration for the console core.

Loaded from environment variables and a local `.env` file (if present).
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConsoleSettings(BaseSettings):
    """Settings for a console session.

    Environment variables:
    - LOG_LEVEL                                    (optional)
    - WORKFLOW_CONSOLE_EXECUTION_LATENCY_SECONDS   (optional)
    - WORKFLOW_CONSOLE_EXECUTOR                    (optional)

    Notes:
        Tests can point at a different env file via
        `ConsoleSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    execution_latency_seconds: float = Field(
        default=1.5,
        ge=0.0,
        validation_alias="WORKFLOW_CONSOLE_EXECUTION_LATENCY_SECONDS",
        description="Delay between starting a run and its deferred completion",
    )

    executor: Literal["mock"] = Field(
        default="mock",
        validation_alias="WORKFLOW_CONSOLE_EXECUTOR",
        description="Which workflow executor computes run results",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )
