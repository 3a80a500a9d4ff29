"""Limit evaluator: classify lab values against the reference limits.

Each tracked parameter ends up WITHIN, OUT or NO_DATA. Missing, blank or
non-numeric values are NO_DATA, never an error, so the evaluator is total
over whatever the reviewer has typed so far.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from corufa.models.evaluation import AnalysisEvaluation, ParameterState
from corufa.models.expediente import Analisis
from corufa.models.limits import ReferenceLimits

# Presence/absence microbiology: only an exact zero is acceptable.
ABSENCE_REQUIRED = ("coliformes", "ecoli", "salmonella", "pseudomonas")

# Analysis field -> physicochemical upper-bound key. pH is handled separately.
PHYSICOCHEMICAL_MAX = {
    "arsenico": "arsenico_mgL_max",
    "nitratos": "nitratos_mgL_max",
    "nitritos": "nitritos_mgL_max",
    "conductividad": "conductividad_uScm_max",
    "dureza": "dureza_mgL_max",
    "std": "solidos_totales_mgL_max",
    "calcio": "calcio_mgL_max",
    "magnesio": "magnesio_mgL_max",
    "sodio": "sodio_mgL_max",
    "potasio": "potasio_mgL_max",
    "bicarbonato": "bicarbonato_mgL_max",
    "carbonato": "carbonato_mgL_max",
    "sulfatos": "sulfatos_mgL_max",
    "cloruros": "cloruros_mgL_max",
    "temperatura": "temperatura_C_max",
}


def parse_number(value: Any) -> Optional[float]:
    """Parse reviewer input into a finite float, or None when there is no number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text or "_" in text:  # float() would accept "1_000"
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def within_range(value: Any, min_: Optional[float], max_: Optional[float]) -> ParameterState:
    number = parse_number(value)
    if number is None:
        return ParameterState.NO_DATA
    if min_ is not None and number < min_:
        return ParameterState.OUT
    if max_ is not None and number > max_:
        return ParameterState.OUT
    return ParameterState.WITHIN


def parameter_bounds(limits: ReferenceLimits) -> dict[str, tuple[Optional[float], Optional[float]]]:
    """(min, max) per tracked analysis field, in display order."""
    fq = limits.fisicoquimico
    bounds: dict[str, tuple[Optional[float], Optional[float]]] = {"pH": (fq.pH_min, fq.pH_max)}
    for field, key in PHYSICOCHEMICAL_MAX.items():
        bounds[field] = (None, getattr(fq, key))
    for field in ABSENCE_REQUIRED:
        bounds[field] = (0, 0)
    bounds["aerobios"] = (None, limits.microbiologico.aerobios_mesofilos_max)
    return bounds


def evaluate_analysis(analisis: Analisis, limits: ReferenceLimits) -> AnalysisEvaluation:
    states = {
        field: within_range(getattr(analisis, field), min_, max_)
        for field, (min_, max_) in parameter_bounds(limits).items()
    }
    values = list(states.values())
    return AnalysisEvaluation(
        states=states,
        present=sum(1 for s in values if s is not ParameterState.NO_DATA),
        ok=values.count(ParameterState.WITHIN),
        bad=values.count(ParameterState.OUT),
    )
