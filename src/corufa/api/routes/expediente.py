"""Dossier endpoints: field edits, reset, annexes and the evaluated report."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import PlainTextResponse

from corufa.api.routes._state import apply, current
from corufa.models.evaluation import DossierReport
from corufa.models.expediente import Expediente
from corufa.report import render_report
from corufa.state import add_annexes, evaluate, reset_dossier, update_section

router = APIRouter(tags=["expediente"])


@router.get("")
async def get_expediente(request: Request) -> Expediente:
    return current(request).exp


@router.patch("/{section}")
def patch_section(
    section: str, request: Request, changes: dict[str, Any] = Body(...)
) -> Expediente:
    """Overwrite the given fields of one section (meta, basicos, tecnicos, ...)."""
    return apply(request, lambda s: update_section(s, section, changes)).exp


@router.post("/reset")
def reset(request: Request) -> Expediente:
    return apply(request, reset_dossier).exp


@router.post("/anexos")
def post_anexos(request: Request, names: list[str] = Body(...)) -> Expediente:
    return apply(request, lambda s: add_annexes(s, names)).exp


@router.get("/report")
async def get_report(request: Request) -> DossierReport:
    return evaluate(current(request))


@router.get("/report.txt", response_class=PlainTextResponse)
async def get_report_text(request: Request) -> str:
    return render_report(current(request))
