"""Bulk lab-result ingestion from a two-line delimited text (header + one row).

Example::

    pH,arsenico,nitratos,...
    7.1,0.005,10,...

Fields may be separated by commas, semicolons or tabs. Header names are
matched case-insensitively; unknown headers are ignored.
"""

from __future__ import annotations

import logging
import re

from corufa.core.exceptions import BulkAnalysisParseError

logger = logging.getLogger(__name__)

_LINE_SPLIT = re.compile(r"\r?\n")
_FIELD_SPLIT = re.compile(r"[,\t;]+")

# Lower-cased header -> Analisis field name.
HEADER_FIELDS: dict[str, str] = {
    "ph": "pH",
    **{
        name: name
        for name in (
            "arsenico", "nitratos", "nitritos", "conductividad", "dureza", "std",
            "calcio", "magnesio", "sodio", "potasio", "bicarbonato", "carbonato",
            "sulfatos", "cloruros", "temperatura",
            "coliformes", "ecoli", "salmonella", "pseudomonas", "aerobios",
        )
    },
}

EXPECTED_HEADER = ",".join(HEADER_FIELDS.values())


def parse_bulk_analysis(text: str | bytes) -> dict[str, str]:
    """Return {analisis_field: value} for every recognised header.

    Raises:
        BulkAnalysisParseError: when bytes are not UTF-8 or there is no data row.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise BulkAnalysisParseError(f"Analysis file is not valid UTF-8: {exc}") from exc
    if not isinstance(text, str):
        raise BulkAnalysisParseError("Bulk analysis input must be text")
    lines = _LINE_SPLIT.split(text.strip())
    if len(lines) < 2:
        raise BulkAnalysisParseError("CSV has no data row")

    headers = [h.strip().lower() for h in _FIELD_SPLIT.split(lines[0])]
    values = [v.strip() for v in _FIELD_SPLIT.split(lines[1])]

    row: dict[str, str] = {}
    for i, header in enumerate(headers):
        if i < len(values):
            row[header] = values[i]

    parsed = {HEADER_FIELDS[h]: v for h, v in row.items() if h in HEADER_FIELDS}
    ignored = sorted(h for h in row if h not in HEADER_FIELDS)
    if ignored:
        logger.debug("Ignoring unrecognised analysis headers: %s", ignored)
    return parsed
