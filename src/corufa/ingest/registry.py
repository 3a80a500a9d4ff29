"""Driller registry ("padrón") ingestion from free text or a delimited file."""

from __future__ import annotations

import re

from corufa.core.exceptions import RegistryParseError
from corufa.core.types import Registry

_TOKEN_SPLIT = re.compile(r"[\r\n,;\t]+")


def parse_registry(data: str | bytes) -> Registry:
    """Tokenise on any mix of newlines, commas, semicolons and tabs."""
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise RegistryParseError(f"Registry file is not valid UTF-8: {exc}") from exc
    if not isinstance(data, str):
        raise RegistryParseError("Registry input must be text")
    return frozenset(t for t in (s.strip() for s in _TOKEN_SPLIT.split(data)) if t)
