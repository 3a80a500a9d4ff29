"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class StorageConfig(BaseSettings):
    """Key-value storage for the persisted limits and dossier blobs."""

    model_config = {"env_prefix": "CORUFA_STORAGE_"}

    backend: Literal["memory", "file", "redis"] = "file"
    directory: str = ".corufa"  # used by the file backend only
    limits_key: str = "corufa_limits_v1"
    dossier_key: str = "corufa_exp_v1"


class RedisConfig(BaseSettings):
    """Redis connection used when storage.backend == "redis"."""

    model_config = {"env_prefix": "CORUFA_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CORUFA_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    # Sub-configs read CORUFA_STORAGE_* / CORUFA_REDIS_* when AppSettings is built.
    storage: StorageConfig = Field(default_factory=StorageConfig)
    redis: RedisConfig = Field(default_factory=RedisConfig)
