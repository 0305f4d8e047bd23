"""FastAPI app factory.

Endpoints are thin wrappers over one :class:`ConsoleSession`.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grid_workflow_console import __version__
from grid_workflow_console.config import ConsoleSettings
from grid_workflow_console.logging import configure_logging
from grid_workflow_console.server.config import ServerSettings
from grid_workflow_console.server.console_router import router as console_router
from grid_workflow_console.workflow.executor import ExecutorFactory
from grid_workflow_console.workflow.session import ConsoleSession

logger = logging.getLogger(__name__)


def create_app(
    console_settings: ConsoleSettings | None = None,
    server_settings: ServerSettings | None = None,
) -> FastAPI:
    console_settings = console_settings or ConsoleSettings()
    server_settings = server_settings or ServerSettings()
    configure_logging(console_settings.log_level)

    app = FastAPI(
        title="Grid Workflow Console",
        version=__version__,
        description="Workflow selection, parameters and run state for the decision support UI.",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.state.settings = server_settings
    app.state.session = ConsoleSession(
        executor=ExecutorFactory.create(console_settings.executor),
        latency_seconds=console_settings.execution_latency_seconds,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=server_settings.parsed_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(console_router, prefix="/api")

    logger.info(
        "Console app created",
        extra={"latency_seconds": console_settings.execution_latency_seconds},
    )
    return app
