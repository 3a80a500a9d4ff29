"""Overall pre-Plenario verdict.

Approval needs complete applicant and technical sections, all six required
documents, all three signatures, and *some* lab data. Out-of-range lab values
alone do not block approval; only a fully empty analysis does.
"""

from __future__ import annotations

from typing import Collection

from corufa.models.evaluation import AnalysisStatus, DossierReport
from corufa.models.expediente import (
    BASICOS_REQUIRED,
    REQUIRED_DOCS,
    REQUIRED_SIGNATURES,
    TECNICOS_REQUIRED,
    Expediente,
)
from corufa.models.limits import ReferenceLimits
from corufa.validator.completeness import flag_status, section_status
from corufa.validator.fee_classifier import classify_fee
from corufa.validator.limit_evaluator import evaluate_analysis
from corufa.validator.registry_check import registry_status


def evaluate_dossier(
    exp: Expediente,
    limits: ReferenceLimits,
    registry: Collection[str] = frozenset(),
) -> DossierReport:
    basicos = section_status(exp.basicos, BASICOS_REQUIRED)
    tecnicos = section_status(exp.tecnicos, TECNICOS_REQUIRED)
    docs = flag_status(exp.docs, REQUIRED_DOCS)
    firmas = flag_status(exp.firmas, REQUIRED_SIGNATURES)
    analisis = evaluate_analysis(exp.analisis, limits)

    approved = (
        basicos.complete
        and tecnicos.complete
        and docs.complete
        and analisis.status is not AnalysisStatus.NO_DATA
        and firmas.complete
    )

    return DossierReport(
        basicos=basicos,
        tecnicos=tecnicos,
        docs=docs,
        analisis=analisis,
        analisis_status=analisis.status,
        firmas=firmas,
        tasa=classify_fee(limits.tasas_2024, exp.tecnicos.caudal_anual_m3),
        registry=registry_status(registry, exp.basicos.perforistaRegistro),
        approved=approved,
    )
