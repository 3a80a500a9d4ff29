"""Export and import of the combined ``{dossier, limits}`` JSON document."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from corufa.core.exceptions import BundleParseError
from corufa.models.expediente import Expediente
from corufa.models.limits import ReferenceLimits
from corufa.state import AppState

logger = logging.getLogger(__name__)

DOSSIER_KEY = "dossier"
LEGACY_DOSSIER_KEY = "exp"  # files exported by earlier versions
LIMITS_KEY = "limits"


def export_bundle(state: AppState) -> str:
    payload = {
        DOSSIER_KEY: state.exp.model_dump(mode="json"),
        LIMITS_KEY: state.limits.model_dump(mode="json"),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def export_filename(exp: Expediente) -> str:
    return f"checklist_corufa_{exp.meta.expedienteId or 'expediente'}.json"


def import_bundle(state: AppState, text: str | bytes) -> AppState:
    """Return a new state with whichever of dossier/limits the document carries.

    Raises:
        BundleParseError: malformed or too deeply nested JSON, or a section
            that fails validation.
            ``state`` is not modified either way.
    """
    try:
        obj = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        logger.warning("Rejected bundle: invalid JSON (%s)", exc)
        raise BundleParseError(f"Invalid JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise BundleParseError("Bundle must be a JSON object")

    raw_dossier = obj.get(DOSSIER_KEY) or obj.get(LEGACY_DOSSIER_KEY)
    raw_limits = obj.get(LIMITS_KEY)
    update: dict[str, object] = {}
    try:
        if raw_limits:
            update["limits"] = ReferenceLimits.model_validate(raw_limits)
        if raw_dossier:
            update["exp"] = Expediente.model_validate(raw_dossier)
    except ValidationError as exc:
        logger.warning("Rejected bundle: %d validation error(s)", exc.error_count())
        raise BundleParseError(f"Invalid bundle content: {exc}") from exc

    logger.info("Imported bundle sections: %s", sorted(update) or "none")
    return state.model_copy(update=update)
