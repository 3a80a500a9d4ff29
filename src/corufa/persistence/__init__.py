"""Pluggable key-value persistence behind the IKeyValueStore protocol."""

from __future__ import annotations

from corufa.core.config import AppSettings
from corufa.core.protocols import IKeyValueStore
from corufa.persistence.file_backend import JsonFileStore
from corufa.persistence.memory_backend import MemoryKeyValueStore
from corufa.persistence.repository import StateRepository


def create_store(settings: AppSettings | None = None) -> IKeyValueStore:
    """Build the key-value backend selected by ``settings.storage.backend``."""
    if settings is None:
        settings = AppSettings()

    backend = settings.storage.backend
    if backend == "memory":
        return MemoryKeyValueStore()
    if backend == "redis":
        from corufa.persistence.redis_backend import RedisKeyValueStore

        return RedisKeyValueStore(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
        )
    return JsonFileStore(settings.storage.directory)


def create_repository(settings: AppSettings | None = None) -> StateRepository:
    """Create a StateRepository wired to the configured backend and keys."""
    if settings is None:
        settings = AppSettings()
    return StateRepository(
        create_store(settings),
        limits_key=settings.storage.limits_key,
        dossier_key=settings.storage.dossier_key,
    )


__all__ = ["StateRepository", "create_repository", "create_store"]
