"""Configuration loader — reads cache defaults from environment variables.

    TTLCACHE_{SUFFIX} → built-in default
"""

from __future__ import annotations

import os

DEFAULT_TTL_MS = 60000  # 1 minute


class ConfigError(Exception):
    """Raised when an environment setting cannot be parsed."""


def _env(key: str) -> str:
    """Resolve TTLCACHE_{KEY}, stripped. Blank counts as unset."""
    return os.environ.get(f"TTLCACHE_{key}", "").strip()


def load_default_ttl_ms() -> int:
    """Return the default entry lifetime in milliseconds.

    Environment variables:
        TTLCACHE_DEFAULT_TTL_MS — non-negative integer (e.g. 600000)

    Falls back to DEFAULT_TTL_MS when unset or blank.

    Raises:
        ConfigError: If the value is not a non-negative integer.
    """
    raw = _env("DEFAULT_TTL_MS")
    if not raw:
        return DEFAULT_TTL_MS
    try:
        ttl = int(raw)
    except ValueError as exc:
        raise ConfigError(f"TTLCACHE_DEFAULT_TTL_MS must be an integer, got {raw!r}") from exc
    if ttl < 0:
        raise ConfigError(f"TTLCACHE_DEFAULT_TTL_MS must be non-negative, got {ttl}")
    return ttl
