"""Redis key-value backend implementing IKeyValueStore."""

from __future__ import annotations

import redis

from corufa.core.exceptions import RecordDecodeError, StorageError


class RedisKeyValueStore:
    """IKeyValueStore over one Redis database; keys are written without a TTL."""

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0) -> None:
        self._client = redis.Redis(host=host, port=port, db=db, decode_responses=True)

    def get(self, key: str) -> str | None:
        try:
            return self._client.get(key)
        except UnicodeDecodeError as exc:
            raise RecordDecodeError("Redis GET", key, str(exc)) from exc
        except redis.RedisError as exc:
            raise StorageError("Redis GET", key, str(exc)) from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value)
        except redis.RedisError as exc:
            raise StorageError("Redis SET", key, str(exc)) from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except redis.RedisError as exc:
            raise StorageError("Redis DELETE", key, str(exc)) from exc
