"""Tests for driller registry ingestion."""

from __future__ import annotations

import pytest

from corufa.core.exceptions import RegistryParseError
from corufa.ingest.registry import parse_registry


def test_tokenises_on_mixed_delimiters():
    text = "P-001, P-002;P-003\tP-004\r\nP-005\n\n,,P-006 "
    assert parse_registry(text) == frozenset({"P-001", "P-002", "P-003", "P-004", "P-005", "P-006"})


def test_empty_text_yields_empty_registry():
    assert parse_registry("  \n ,; ") == frozenset()


def test_bytes_are_decoded():
    assert parse_registry("\ufeffP-1\nP-2".encode("utf-8")) == frozenset({"P-1", "P-2"})


def test_undecodable_bytes_raise():
    with pytest.raises(RegistryParseError):
        parse_registry(b"\xff\xfe\xfa")
