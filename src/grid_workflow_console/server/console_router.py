"""Console REST API.

Exposes the session's read accessors and mutators to a browser UI. All routes
are mounted under `/api`.

Handlers are `async def` on purpose: they run on the event loop, which is
where the session schedules run completions, so the session only ever sees
one writer.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from grid_workflow_console import __version__
from grid_workflow_console.errors import InvalidSelection, UnknownParameter
from grid_workflow_console.server.models import (
    ApiParameterSpec,
    ApiParameterState,
    ApiSession,
    ApiWorkflow,
    ParameterUpdate,
    RunStarted,
    SelectRequest,
)
from grid_workflow_console.workflow.catalog import (
    ParameterSpec,
    get_params,
    is_valid_value,
    list_workflows,
)
from grid_workflow_console.workflow.results import result_adapter
from grid_workflow_console.workflow.session import ConsoleSession

router = APIRouter()


def _session(request: Request) -> ConsoleSession:
    session = getattr(request.app.state, "session", None)
    if not isinstance(session, ConsoleSession):
        raise HTTPException(status_code=500, detail="Console session not configured")
    return session


def _spec_model(spec: ParameterSpec) -> ApiParameterSpec:
    return ApiParameterSpec.model_validate(spec.to_json())


def _session_model(session: ConsoleSession) -> ApiSession:
    values = session.values()
    parameters: list[ApiParameterState] = []
    for spec in session.parameter_specs:
        effective = session.effective_value(spec.name)
        parameters.append(
            ApiParameterState(
                **_spec_model(spec).model_dump(),
                value=values.get(spec.name),
                effectiveValue=effective,
                valid=is_valid_value(spec, effective),
            )
        )
    state = session.state
    active = session.active_workflow
    return ApiSession(
        activeWorkflow=active.value if active is not None else None,
        parameters=parameters,
        phase=state.phase.value,
        runId=getattr(state, "run_id", None),
        isRunning=session.is_running(),
    )


@router.get("/health")
async def health() -> dict[str, object]:
    return {"status": "ok", "version": __version__}


@router.get("/workflows", response_model=list[ApiWorkflow])
async def list_catalog() -> list[ApiWorkflow]:
    return [
        ApiWorkflow(name=w.value, parameters=[_spec_model(s) for s in get_params(w)])
        for w in list_workflows()
    ]


@router.get("/session", response_model=ApiSession)
async def get_session(request: Request) -> ApiSession:
    return _session_model(_session(request))


@router.post("/session/select", response_model=ApiSession)
async def select_workflow(request: Request, req: SelectRequest) -> ApiSession:
    session = _session(request)
    try:
        session.select_workflow(req.workflow)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown workflow: {req.workflow}")
    return _session_model(session)


@router.post("/session/deselect", response_model=ApiSession)
async def deselect_workflow(request: Request) -> ApiSession:
    session = _session(request)
    session.deselect()
    return _session_model(session)


@router.put("/session/params/{name}", response_model=ApiSession)
async def set_parameter(request: Request, name: str, req: ParameterUpdate) -> ApiSession:
    session = _session(request)
    try:
        session.set_value(name, req.value)
    except InvalidSelection as e:
        raise HTTPException(status_code=409, detail=str(e))
    except UnknownParameter as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _session_model(session)


@router.post("/session/run", response_model=RunStarted)
async def run_workflow(request: Request) -> RunStarted:
    session = _session(request)
    active = session.active_workflow
    try:
        run_id = session.run()
    except InvalidSelection as e:
        raise HTTPException(status_code=409, detail=str(e))
    return RunStarted(runId=run_id, workflow=active.value if active is not None else "")


@router.get("/session/result")
async def get_result(request: Request) -> dict[str, object] | None:
    result = _session(request).result()
    if result is None:
        return None
    return result_adapter.dump_python(result, mode="json")


@router.get("/session/output")
async def get_output(request: Request) -> dict[str, object]:
    return _session(request).render().model_dump(mode="json")
