"""Reference limits for lab parameters and the annual fee tier table.

Field names follow the persisted JSON format so that limits saved or exported
by earlier versions of the checklist load unchanged.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class FeeTier(BaseModel):
    """A fee bracket keyed by declared annual volume (m³/year).

    The range is half-open, ``[min, max)``; ``max=None`` is an unbounded top tier.
    """

    cat: str
    min: float
    max: Optional[float] = None
    monto: float


class PhysicochemicalLimits(BaseModel):
    """Upper (and for pH, lower) bounds; ``None`` means unconstrained."""

    pH_min: Optional[float] = 6.5
    pH_max: Optional[float] = 8.5
    arsenico_mgL_max: Optional[float] = 0.01
    nitratos_mgL_max: Optional[float] = 45
    nitritos_mgL_max: Optional[float] = 0.1
    conductividad_uScm_max: Optional[float] = 2000
    dureza_mgL_max: Optional[float] = 500
    solidos_totales_mgL_max: Optional[float] = 1500
    calcio_mgL_max: Optional[float] = 200
    magnesio_mgL_max: Optional[float] = 150
    sodio_mgL_max: Optional[float] = 200
    potasio_mgL_max: Optional[float] = 20
    bicarbonato_mgL_max: Optional[float] = 400
    carbonato_mgL_max: Optional[float] = 30
    sulfatos_mgL_max: Optional[float] = 400
    cloruros_mgL_max: Optional[float] = 250
    temperatura_C_max: Optional[float] = 30


class MicrobiologicalLimits(BaseModel):
    """Presence/absence parameters are stored as 0 for reference only."""

    coliformes_totales: Optional[float] = 0
    e_coli: Optional[float] = 0
    salmonella: Optional[float] = 0
    pseudomonas: Optional[float] = 0
    aerobios_mesofilos_max: Optional[float] = 100


def default_fee_tiers() -> list[FeeTier]:
    """2024 tariff; category V has no upper bound."""
    return [
        FeeTier(cat="I", min=0, max=500_000, monto=90_163),
        FeeTier(cat="II", min=500_000, max=1_000_000, monto=135_245),
        FeeTier(cat="III", min=1_000_000, max=5_000_000, monto=180_416),
        FeeTier(cat="IV", min=5_000_000, max=10_000_000, monto=225_409),
        FeeTier(cat="V", min=10_000_000, max=None, monto=392_591),
    ]


class ReferenceLimits(BaseModel):
    """Editable acceptable-range table plus the fee tiers."""

    fisicoquimico: PhysicochemicalLimits = Field(default_factory=PhysicochemicalLimits)
    microbiologico: MicrobiologicalLimits = Field(default_factory=MicrobiologicalLimits)
    tasas_2024: list[FeeTier] = Field(default_factory=default_fee_tiers)


def default_limits() -> ReferenceLimits:
    return ReferenceLimits()


def tier_gaps(tiers: list[FeeTier]) -> list[tuple[str, str]]:
    """Return (cat, next_cat) pairs whose ranges do not meet exactly.

    Advisory only: the classifier still scans the list as given.
    """
    gaps: list[tuple[str, str]] = []
    for current, following in zip(tiers, tiers[1:]):
        if current.max is None or current.max != following.min:
            gaps.append((current.cat, following.cat))
    return gaps
