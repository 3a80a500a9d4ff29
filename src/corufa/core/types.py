"""Type aliases used across the checklist."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
Registry = frozenset[str]  # driller registration numbers, exact-match lookup
