"""Reference limits endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request

from corufa.api.routes._state import apply, current
from corufa.models.limits import FeeTier, ReferenceLimits, tier_gaps
from corufa.state import restore_default_limits, set_fee_tiers, set_limits, update_limit_group

router = APIRouter(tags=["limits"])


@router.get("")
async def get_limits(request: Request) -> ReferenceLimits:
    return current(request).limits


@router.put("")
def put_limits(request: Request, limits: ReferenceLimits) -> ReferenceLimits:
    return apply(request, lambda s: set_limits(s, limits)).limits


@router.put("/tasas")
def put_tiers(request: Request, tiers: list[FeeTier]) -> ReferenceLimits:
    return apply(request, lambda s: set_fee_tiers(s, tiers)).limits


@router.get("/tasas/gaps")
async def get_tier_gaps(request: Request) -> dict[str, list[list[str]]]:
    """Neighbouring tiers whose ranges do not meet exactly."""
    return {"gaps": [list(pair) for pair in tier_gaps(current(request).limits.tasas_2024)]}


@router.patch("/{group}")
def patch_group(
    group: str, request: Request, changes: dict[str, Any] = Body(...)
) -> ReferenceLimits:
    return apply(request, lambda s: update_limit_group(s, group, changes)).limits


@router.post("/restore-defaults")
def restore_defaults(request: Request) -> ReferenceLimits:
    return apply(request, restore_default_limits).limits
