"""
Central configuration for merklecommit.

This module provides a single, typed configuration object that reads from
environment variables (12-factor style) using pydantic-settings.

Usage:

    from merklecommit.core.settings import get_settings

    settings = get_settings()
    hasher = Hasher(settings.hash_algorithm)

Environment variables:

    MERKLECOMMIT_HASH_ALGORITHM   hashlib algorithm name (default: sha512)
    MERKLECOMMIT_LOG_LEVEL        DEBUG/INFO/WARNING/ERROR (default: WARNING)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class MerkleSettings(BaseSettings):
    """
    Settings for tree construction and the CLI.

    The hash algorithm is only checked for being a string here; whether
    hashlib supports it with a fixed digest size is decided by Hasher.
    """

    hash_algorithm: str = Field(
        default="sha512",
        description="hashlib algorithm used for leaves and internal nodes.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG/INFO/WARNING/ERROR).",
    )

    model_config = SettingsConfigDict(env_prefix="MERKLECOMMIT_")

    @field_validator("hash_algorithm")
    @classmethod
    def _normalize_algorithm(cls, v: str) -> str:
        return (v or "sha512").strip().lower()

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        v = (v or "WARNING").strip().upper()
        if v == "WARN":
            return "WARNING"
        if v not in _LOG_LEVELS:
            return "WARNING"
        return v


@lru_cache(maxsize=1)
def get_settings() -> MerkleSettings:
    """
    Cached accessor for MerkleSettings.

    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return MerkleSettings()
