"""Unit tests for StateRepository load/save and fallback to defaults."""

from __future__ import annotations

import json
from unittest.mock import patch

from corufa.core.config import AppSettings, RedisConfig, StorageConfig
from corufa.models.expediente import Expediente
from corufa.models.limits import ReferenceLimits
from corufa.persistence import create_repository, create_store
from corufa.persistence.file_backend import JsonFileStore
from corufa.persistence.redis_backend import RedisKeyValueStore
from corufa.persistence.repository import StateRepository
from corufa.state import AppState, load_registry, set_fee_tiers, set_field
from tests.fakes import MemoryKeyValueStore


class TestLoad:
    def test_empty_store_yields_defaults(self):
        state = StateRepository(MemoryKeyValueStore()).load()
        assert state.limits == ReferenceLimits()
        assert state.exp.basicos.propietario == ""
        assert state.registry == frozenset()

    def test_unparseable_blob_falls_back_per_record(self):
        store = MemoryKeyValueStore()
        store.set("corufa_limits_v1", "{not json")
        store.set("corufa_exp_v1", json.dumps({"meta": {"expedienteId": "EXP-9"}}))
        state = StateRepository(store).load()
        assert state.limits == ReferenceLimits()
        assert state.exp.meta.expedienteId == "EXP-9"

    def test_invalid_shape_falls_back(self):
        store = MemoryKeyValueStore()
        store.set("corufa_limits_v1", json.dumps({"tasas_2024": "nope"}))
        assert StateRepository(store).load().limits == ReferenceLimits()

    def test_numeric_analysis_values_load_as_text(self):
        store = MemoryKeyValueStore()
        store.set("corufa_exp_v1", json.dumps({"analisis": {"pH": 7.2}}))
        assert StateRepository(store).load().exp.analisis.pH == "7.2"

    def test_non_utf8_blob_falls_back_per_record(self, tmp_path, caplog):
        store = JsonFileStore(tmp_path)
        tiers = set_fee_tiers(AppState(), [{"cat": "U", "min": 0, "monto": 1}])
        store.set("corufa_limits_v1", tiers.limits.model_dump_json())
        (tmp_path / "corufa_exp_v1.json").write_bytes(b"\xff\xfe{garbage")
        with caplog.at_level("WARNING", logger="corufa.persistence.repository"):
            state = StateRepository(store).load()
        assert state.exp.meta.expedienteId == ""
        assert [t.cat for t in state.limits.tasas_2024] == ["U"]
        assert "corufa_exp_v1" in caplog.text


class TestSave:
    def test_round_trip(self, complete_state):
        repo = StateRepository(MemoryKeyValueStore())
        repo.save(complete_state)
        loaded = repo.load()
        assert loaded.exp == complete_state.exp
        assert loaded.limits == complete_state.limits

    def test_registry_is_not_persisted(self):
        repo = StateRepository(MemoryKeyValueStore())
        repo.save(load_registry(AppState(), "P-1\nP-2"))
        assert repo.load().registry == frozenset()

    def test_custom_keys(self):
        store = MemoryKeyValueStore()
        repo = StateRepository(store, limits_key="lim", dossier_key="dos")
        repo.save(set_field(AppState(), "meta", "expedienteId", "X"))
        assert Expediente.model_validate_json(store.get("dos")).meta.expedienteId == "X"
        assert store.get("lim") is not None
        assert store.get("corufa_exp_v1") is None

    def test_clear_removes_both_records(self):
        store = MemoryKeyValueStore()
        repo = StateRepository(store)
        repo.save(AppState())
        repo.clear()
        assert store.get("corufa_exp_v1") is None
        assert store.get("corufa_limits_v1") is None


class TestFactory:
    def test_memory_backend(self):
        settings = AppSettings(storage=StorageConfig(backend="memory"))
        assert isinstance(create_store(settings), MemoryKeyValueStore)

    def test_file_backend_uses_directory(self, tmp_path):
        settings = AppSettings(storage=StorageConfig(backend="file", directory=str(tmp_path)))
        repo = create_repository(settings)
        repo.save(AppState())
        assert isinstance(create_store(settings), JsonFileStore)
        assert (tmp_path / "corufa_exp_v1.json").exists()

    def test_redis_backend_uses_connection_settings(self):
        settings = AppSettings(
            storage=StorageConfig(backend="redis"),
            redis=RedisConfig(host="cache.local", port=6380, db=2),
        )
        with patch("redis.Redis") as redis_cls:
            store = create_store(settings)
        assert isinstance(store, RedisKeyValueStore)
        redis_cls.assert_called_once_with(
            host="cache.local", port=6380, db=2, decode_responses=True
        )
