"""FastAPI display adapter for the workflow console.

Design intent:
- Keep console logic in `grid_workflow_console.workflow.*`
- Keep server-specific concerns (routing, CORS) here
"""

from __future__ import annotations

__all__ = ["create_app"]

from grid_workflow_console.server.app import create_app
