"""Application state and the pure update functions that produce new states.

Every update returns a fresh ``AppState``; nothing is mutated in place and
nothing is persisted here. Callers commit a change by passing the returned
state to ``StateRepository.save``.
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from corufa.core.exceptions import FieldUpdateError
from corufa.core.types import JsonDict, Registry
from corufa.ingest.bulk_analysis import parse_bulk_analysis
from corufa.ingest.registry import parse_registry
from corufa.models.evaluation import DossierReport
from corufa.models.expediente import SECTIONS, Expediente, empty_expediente
from corufa.models.limits import FeeTier, ReferenceLimits, default_limits
from corufa.validator.verdict import evaluate_dossier

LIMIT_GROUPS = ("fisicoquimico", "microbiologico")


class AppState(BaseModel):
    """The dossier under review, the reference limits and the loaded registry.

    The registry is session-only and is never persisted or exported.
    """

    model_config = ConfigDict(frozen=True)

    exp: Expediente = Field(default_factory=empty_expediente)
    limits: ReferenceLimits = Field(default_factory=default_limits)
    registry: Registry = frozenset()


def evaluate(state: AppState) -> DossierReport:
    return evaluate_dossier(state.exp, state.limits, state.registry)


# ---------------------------------------------------------------------------
# Dossier edits
# ---------------------------------------------------------------------------

def _merge(model: BaseModel, changes: JsonDict, where: str) -> BaseModel:
    unknown = sorted(set(changes) - set(type(model).model_fields))
    if unknown:
        raise FieldUpdateError(f"Unknown field(s) in {where}: {', '.join(unknown)}")
    try:
        return type(model).model_validate({**model.model_dump(), **changes})
    except ValidationError as exc:
        raise FieldUpdateError(f"Invalid value in {where}: {exc}") from exc


def update_section(state: AppState, section: str, changes: JsonDict) -> AppState:
    """Overwrite some fields of one dossier section."""
    if section not in SECTIONS:
        raise FieldUpdateError(f"Unknown section: {section!r}")
    updated = _merge(getattr(state.exp, section), changes, section)
    return state.model_copy(update={"exp": state.exp.model_copy(update={section: updated})})


def set_field(state: AppState, section: str, field: str, value: Any) -> AppState:
    return update_section(state, section, {field: value})


def add_annexes(state: AppState, names: Iterable[str]) -> AppState:
    """Append uploaded file names; the files themselves are not kept."""
    anexos = [*state.exp.docs.anexos, *names]
    return update_section(state, "docs", {"anexos": anexos})


def reset_dossier(state: AppState) -> AppState:
    return state.model_copy(update={"exp": empty_expediente()})


def apply_bulk_analysis(state: AppState, text: str | bytes) -> AppState:
    """Overwrite analysis fields named in a two-line CSV; others stay as they are."""
    return update_section(state, "analisis", parse_bulk_analysis(text))


# ---------------------------------------------------------------------------
# Reference limits
# ---------------------------------------------------------------------------

def set_limits(state: AppState, limits: ReferenceLimits) -> AppState:
    return state.model_copy(update={"limits": limits})


def restore_default_limits(state: AppState) -> AppState:
    return set_limits(state, default_limits())


def update_limit_group(state: AppState, group: str, changes: JsonDict) -> AppState:
    """Edit bounds in fisicoquimico or microbiologico; blank clears a bound."""
    if group not in LIMIT_GROUPS:
        raise FieldUpdateError(f"Unknown limits group: {group!r}")
    cleaned = {
        k: None if v is None or (isinstance(v, str) and not v.strip()) else v
        for k, v in changes.items()
    }
    updated = _merge(getattr(state.limits, group), cleaned, group)
    return set_limits(state, state.limits.model_copy(update={group: updated}))


def set_fee_tiers(state: AppState, tiers: Iterable[FeeTier | dict[str, Any]]) -> AppState:
    """Replace the tier table as given; order and contiguity are the caller's concern."""
    try:
        parsed = [FeeTier.model_validate(t) if not isinstance(t, FeeTier) else t for t in tiers]
    except ValidationError as exc:
        raise FieldUpdateError(f"Invalid fee tier: {exc}") from exc
    return set_limits(state, state.limits.model_copy(update={"tasas_2024": parsed}))


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def load_registry(state: AppState, data: str | bytes) -> AppState:
    return state.model_copy(update={"registry": parse_registry(data)})
