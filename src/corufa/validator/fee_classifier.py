"""Fee classifier: map a declared annual volume to its tariff category."""

from __future__ import annotations

from typing import Any

from corufa.models.evaluation import FeeResult
from corufa.models.limits import FeeTier
from corufa.validator.limit_evaluator import parse_number


def classify_fee(tiers: list[FeeTier], volume: Any) -> FeeResult:
    """First tier with ``min <= volume < max`` (or ``max is None``) wins.

    The list is scanned as given; it is neither sorted nor checked for gaps or
    overlaps. Invalid or negative volumes are unclassified.
    """
    n = parse_number(volume)
    if n is None or n < 0:
        return FeeResult()
    for tier in tiers:
        if n >= tier.min and (tier.max is None or n < tier.max):
            return FeeResult(cat=tier.cat, monto=tier.monto)
    return FeeResult()
