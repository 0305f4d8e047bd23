"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from grid_workflow_console.config import ConsoleSettings
from grid_workflow_console.server.config import ServerSettings

_ENV_VARS = (
    "LOG_LEVEL",
    "WORKFLOW_CONSOLE_EXECUTION_LATENCY_SECONDS",
    "WORKFLOW_CONSOLE_EXECUTOR",
    "WORKFLOW_CONSOLE_CORS_ORIGINS",
)


@pytest.fixture(autouse=True)
def _clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_console_settings_defaults() -> None:
    settings = ConsoleSettings()

    assert settings.log_level == "INFO"
    assert settings.execution_latency_seconds == 1.5
    assert settings.executor == "mock"


def test_console_settings_load_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "LOG_LEVEL=DEBUG",
                "WORKFLOW_CONSOLE_EXECUTION_LATENCY_SECONDS=0.25",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = ConsoleSettings()

    assert settings.log_level == "DEBUG"
    assert settings.execution_latency_seconds == 0.25


def test_negative_latency_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WORKFLOW_CONSOLE_EXECUTION_LATENCY_SECONDS", "-1")
    with pytest.raises(ValidationError):
        ConsoleSettings()


def test_unknown_executor_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WORKFLOW_CONSOLE_EXECUTOR", "spark")
    with pytest.raises(ValidationError):
        ConsoleSettings()


def test_server_settings_parse_cors_origins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WORKFLOW_CONSOLE_CORS_ORIGINS", " http://a.test , ,http://b.test")
    settings = ServerSettings()
    assert settings.parsed_cors_origins() == ["http://a.test", "http://b.test"]
