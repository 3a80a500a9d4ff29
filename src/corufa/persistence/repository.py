"""Load and save the application state as two independently keyed JSON blobs."""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from corufa.core.exceptions import RecordDecodeError
from corufa.core.protocols import IKeyValueStore
from corufa.models.expediente import Expediente, empty_expediente
from corufa.models.limits import ReferenceLimits, default_limits
from corufa.state import AppState

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

DEFAULT_LIMITS_KEY = "corufa_limits_v1"
DEFAULT_DOSSIER_KEY = "corufa_exp_v1"


class StateRepository:
    """Explicit load/save of ``AppState`` over any IKeyValueStore.

    The registry is session-only and is neither saved nor restored.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        *,
        limits_key: str = DEFAULT_LIMITS_KEY,
        dossier_key: str = DEFAULT_DOSSIER_KEY,
    ) -> None:
        self._store = store
        self._limits_key = limits_key
        self._dossier_key = dossier_key

    def _load(self, key: str, model: type[M], fallback: M) -> M:
        try:
            raw = self._store.get(key)
        except RecordDecodeError as exc:
            logger.warning("Stored %s under %r is not text, using defaults: %s",
                           model.__name__, key, exc)
            return fallback
        if raw is None:
            return fallback
        try:
            return model.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Stored %s under %r is unreadable, using defaults: %s",
                           model.__name__, key, exc.errors()[0].get("msg", exc))
            return fallback

    def load(self) -> AppState:
        """Stored state, falling back per record to built-in defaults."""
        return AppState(
            exp=self._load(self._dossier_key, Expediente, empty_expediente()),
            limits=self._load(self._limits_key, ReferenceLimits, default_limits()),
        )

    def save(self, state: AppState) -> None:
        """Write both records; last write wins."""
        self._store.set(self._limits_key, state.limits.model_dump_json())
        self._store.set(self._dossier_key, state.exp.model_dump_json())
        logger.debug("Saved state under %r and %r", self._limits_key, self._dossier_key)

    def clear(self) -> None:
        self._store.delete(self._limits_key)
        self._store.delete(self._dossier_key)
