"""Import/export of the JSON bundle, bulk analysis and registry loading."""

from __future__ import annotations

from fastapi import APIRouter, Request, Response
from fastapi.concurrency import run_in_threadpool

from corufa.api.routes._state import apply, current
from corufa.ingest.bundle import export_bundle, export_filename, import_bundle
from corufa.models.expediente import Analisis
from corufa.state import apply_bulk_analysis, evaluate, load_registry

router = APIRouter(tags=["io"])


@router.get("/bundle")
async def get_bundle(request: Request) -> Response:
    state = current(request)
    return Response(
        content=export_bundle(state),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(state.exp)}"'},
    )


@router.post("/bundle")
async def post_bundle(request: Request) -> dict[str, str]:
    body = await request.body()
    state = await run_in_threadpool(apply, request, lambda s: import_bundle(s, body))
    return {"status": "imported", "expedienteId": state.exp.meta.expedienteId}


@router.post("/analisis/bulk")
async def post_bulk_analysis(request: Request) -> Analisis:
    body = await request.body()
    state = await run_in_threadpool(apply, request, lambda s: apply_bulk_analysis(s, body))
    return state.exp.analisis


@router.post("/registry")
async def post_registry(request: Request) -> dict[str, object]:
    """Load the driller registry for this session; it is not persisted."""
    body = await request.body()
    state = await run_in_threadpool(
        apply, request, lambda s: load_registry(s, body), persist=False
    )
    return {"count": len(state.registry), "status": evaluate(state).registry.value}
