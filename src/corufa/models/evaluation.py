"""Derived results: parameter states, section statuses, fee tier, verdict."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ParameterState(StrEnum):
    WITHIN = "WITHIN"
    OUT = "OUT"
    NO_DATA = "NO_DATA"


class AnalysisStatus(StrEnum):
    NO_DATA = "NO_DATA"
    ALL_IN_RANGE = "ALL_IN_RANGE"
    PARTIALLY_OUT = "PARTIALLY_OUT"


class SectionStatus(StrEnum):
    COMPLETE = "COMPLETE"
    INCOMPLETE = "INCOMPLETE"
    EMPTY = "EMPTY"
    NOT_APPLICABLE = "NOT_APPLICABLE"  # no required fields


class RegistryStatus(StrEnum):
    NO_REGISTRY = "NO_REGISTRY"
    VALIDATED = "VALIDATED"
    NOT_FOUND = "NOT_FOUND"


class AnalysisEvaluation(BaseModel):
    """Per-parameter states plus aggregate counts."""

    states: dict[str, ParameterState] = Field(default_factory=dict)
    present: int = 0
    ok: int = 0
    bad: int = 0

    @property
    def status(self) -> AnalysisStatus:
        if self.present == 0:
            return AnalysisStatus.NO_DATA
        if self.bad == 0:
            return AnalysisStatus.ALL_IN_RANGE
        return AnalysisStatus.PARTIALLY_OUT


class SectionResult(BaseModel):
    filled: int = 0
    total: int = 0
    status: SectionStatus = SectionStatus.NOT_APPLICABLE

    @property
    def complete(self) -> bool:
        return self.status is SectionStatus.COMPLETE


UNCLASSIFIED_CAT = "—"


class FeeResult(BaseModel):
    """Fee tier found for a declared annual volume."""

    cat: str = UNCLASSIFIED_CAT
    monto: float = 0

    @property
    def classified(self) -> bool:
        return self.cat != UNCLASSIFIED_CAT


class DossierReport(BaseModel):
    """Everything the reviewer sees before deciding to send a dossier to Plenario."""

    basicos: SectionResult
    tecnicos: SectionResult
    docs: SectionResult
    analisis: AnalysisEvaluation
    analisis_status: AnalysisStatus
    firmas: SectionResult
    tasa: FeeResult
    registry: RegistryStatus = RegistryStatus.NO_REGISTRY
    approved: bool = False
