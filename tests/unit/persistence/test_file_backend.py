"""Unit tests for JsonFileStore."""

from __future__ import annotations

import pytest

from corufa.core.exceptions import RecordDecodeError, StorageError
from corufa.core.protocols import IKeyValueStore
from corufa.persistence.file_backend import JsonFileStore


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(tmp_path / "storage")


def test_satisfies_protocol(store):
    assert isinstance(store, IKeyValueStore)


def test_get_missing_returns_none(store):
    assert store.get("corufa_limits_v1") is None


def test_set_creates_directory_and_file(store, tmp_path):
    store.set("corufa_limits_v1", '{"a": 1}')
    assert (tmp_path / "storage" / "corufa_limits_v1.json").read_text(encoding="utf-8") == '{"a": 1}'
    assert store.get("corufa_limits_v1") == '{"a": 1}'


def test_last_write_wins(store):
    store.set("k", "first")
    store.set("k", "second")
    assert store.get("k") == "second"


def test_delete_is_idempotent(store):
    store.set("k", "v")
    store.delete("k")
    store.delete("k")
    assert store.get("k") is None


def test_rejects_path_like_keys(store):
    with pytest.raises(StorageError):
        store.set("../outside", "v")


def test_non_utf8_file_raises_decode_error(store, tmp_path):
    (tmp_path / "storage").mkdir()
    (tmp_path / "storage" / "corufa_exp_v1.json").write_bytes(b"\xff\xfe{garbage")
    with pytest.raises(RecordDecodeError) as exc_info:
        store.get("corufa_exp_v1")
    assert exc_info.value.key == "corufa_exp_v1"
