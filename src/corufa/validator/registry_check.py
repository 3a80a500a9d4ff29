"""Driller registration number lookup against a loaded registry list."""

from __future__ import annotations

from typing import Any, Collection

from corufa.models.evaluation import RegistryStatus


def registry_status(registry: Collection[str], registro: Any) -> RegistryStatus:
    if not registry:
        return RegistryStatus.NO_REGISTRY
    if str(registro if registro is not None else "").strip() in registry:
        return RegistryStatus.VALIDATED
    return RegistryStatus.NOT_FOUND
