"""Section completeness: bucket required text fields or boolean flags."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from corufa.models.evaluation import SectionResult, SectionStatus


def is_filled(x: Any) -> bool:
    return x is not None and str(x).strip() != ""


def _bucket(filled: int, total: int) -> SectionResult:
    if total == 0:
        status = SectionStatus.NOT_APPLICABLE
    elif filled == total:
        status = SectionStatus.COMPLETE
    elif filled == 0:
        status = SectionStatus.EMPTY
    else:
        status = SectionStatus.INCOMPLETE
    return SectionResult(filled=filled, total=total, status=status)


def section_status(record: BaseModel | Mapping[str, Any], required: Iterable[str]) -> SectionResult:
    """Count required fields that are non-blank after trimming."""
    data = record.model_dump() if isinstance(record, BaseModel) else record
    names = list(required)
    return _bucket(sum(1 for k in names if is_filled(data.get(k))), len(names))


def flag_status(record: BaseModel | Mapping[str, Any], flags: Iterable[str]) -> SectionResult:
    """Same bucketing as section_status, counting truthy boolean flags."""
    data = record.model_dump() if isinstance(record, BaseModel) else record
    names = list(flags)
    return _bucket(sum(1 for k in names if bool(data.get(k))), len(names))
