#!/usr/bin/env python3
"""Programmatic console session example.

This demonstrates driving the console core directly, without the web adapter:

* select a workflow and edit one parameter
* start a run and wait for its deferred completion
* print the rendered output table
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from grid_workflow_console.config import ConsoleSettings
from grid_workflow_console.logging import configure_logging
from grid_workflow_console.workflow.catalog import WorkflowName
from grid_workflow_console.workflow.session import ConsoleSession


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run one workflow (programmatic example).")
    parser.add_argument(
        "--workflow",
        default=WorkflowName.ANOMALY_DETECTION.value,
        choices=[w.value for w in WorkflowName],
        help="Workflow to run",
    )
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help='Parameter override, e.g. "eps=0.3" (repeatable)',
    )
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace, settings: ConsoleSettings) -> int:
    session = ConsoleSession(latency_seconds=settings.execution_latency_seconds)
    session.select_workflow(args.workflow)
    for item in args.param:
        name, _, value = item.partition("=")
        session.set_value(name.strip(), value.strip())

    session.run()
    print(session.render().message)
    while session.is_running():
        await asyncio.sleep(0.1)

    display = session.render()
    print(display.message)
    print(" | ".join(display.columns))
    for row in display.rows:
        print(" | ".join(row))
    for badge in display.badges:
        print(f"{badge.label}: {badge.value}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = ConsoleSettings()
    configure_logging(settings.log_level)
    return asyncio.run(_run(args, settings))


if __name__ == "__main__":
    raise SystemExit(main())
