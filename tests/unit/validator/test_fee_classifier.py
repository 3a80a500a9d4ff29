"""Tests for the fee classifier and tier table checks."""

from __future__ import annotations

import pytest

from corufa.models.evaluation import UNCLASSIFIED_CAT
from corufa.models.limits import FeeTier, default_fee_tiers, tier_gaps
from corufa.validator.fee_classifier import classify_fee

TIERS = default_fee_tiers()


@pytest.mark.parametrize(
    "volume, cat, monto",
    [
        ("0", "I", 90163),
        ("499999", "I", 90163),
        ("500000", "II", 135245),
        ("999999.99", "II", 135245),
        ("1000000", "III", 180416),
        ("5000000", "IV", 225409),
        ("10000000", "V", 392591),
        ("99999999", "V", 392591),
        (1e15, "V", 392591),
    ],
)
def test_half_open_ranges(volume, cat, monto):
    result = classify_fee(TIERS, volume)
    assert result.cat == cat
    assert result.monto == monto
    assert result.classified


@pytest.mark.parametrize("volume", ["", "abc", "-1", None, "inf"])
def test_invalid_volume_is_unclassified(volume):
    result = classify_fee(TIERS, volume)
    assert result.cat == UNCLASSIFIED_CAT
    assert result.monto == 0
    assert not result.classified


def test_no_matching_tier_is_unclassified():
    tiers = [FeeTier(cat="I", min=100, max=200, monto=1)]
    assert not classify_fee(tiers, "50").classified
    assert not classify_fee(tiers, "200").classified


def test_first_match_wins_on_overlap():
    tiers = [
        FeeTier(cat="A", min=0, max=1000, monto=1),
        FeeTier(cat="B", min=500, max=None, monto=2),
    ]
    assert classify_fee(tiers, "700").cat == "A"
    assert classify_fee(tiers, "1000").cat == "B"


def test_list_is_not_sorted():
    tiers = [
        FeeTier(cat="TOP", min=0, max=None, monto=9),
        FeeTier(cat="I", min=0, max=10, monto=1),
    ]
    assert classify_fee(tiers, "5").cat == "TOP"


class TestTierGaps:
    def test_defaults_are_contiguous(self):
        assert tier_gaps(TIERS) == []

    def test_reports_gap_and_overlap(self):
        tiers = [
            FeeTier(cat="I", min=0, max=100, monto=1),
            FeeTier(cat="II", min=150, max=300, monto=2),
            FeeTier(cat="III", min=250, max=None, monto=3),
        ]
        assert tier_gaps(tiers) == [("I", "II"), ("II", "III")]
