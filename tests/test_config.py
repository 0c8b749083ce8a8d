"""Tests for config module."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from config import DEFAULT_TTL_MS, ConfigError, load_default_ttl_ms


class TestLoadDefaultTtl:

    def test_no_env_vars_returns_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert load_default_ttl_ms() == DEFAULT_TTL_MS == 60000

    def test_env_value(self) -> None:
        with patch.dict(os.environ, {"TTLCACHE_DEFAULT_TTL_MS": "600000"}, clear=True):
            assert load_default_ttl_ms() == 600000

    def test_surrounding_whitespace_stripped(self) -> None:
        with patch.dict(os.environ, {"TTLCACHE_DEFAULT_TTL_MS": " 1500 "}, clear=True):
            assert load_default_ttl_ms() == 1500

    def test_zero_allowed(self) -> None:
        with patch.dict(os.environ, {"TTLCACHE_DEFAULT_TTL_MS": "0"}, clear=True):
            assert load_default_ttl_ms() == 0

    def test_blank_value_ignored(self) -> None:
        with patch.dict(os.environ, {"TTLCACHE_DEFAULT_TTL_MS": "  "}, clear=True):
            assert load_default_ttl_ms() == DEFAULT_TTL_MS

    def test_non_integer_raises(self) -> None:
        with patch.dict(os.environ, {"TTLCACHE_DEFAULT_TTL_MS": "ten"}, clear=True):
            with pytest.raises(ConfigError, match="must be an integer"):
                load_default_ttl_ms()

    def test_negative_raises(self) -> None:
        with patch.dict(os.environ, {"TTLCACHE_DEFAULT_TTL_MS": "-1"}, clear=True):
            with pytest.raises(ConfigError, match="non-negative"):
                load_default_ttl_ms()

    def test_unrelated_prefix_ignored(self) -> None:
        with patch.dict(os.environ, {"DEFAULT_TTL_MS": "5"}, clear=True):
            assert load_default_ttl_ms() == DEFAULT_TTL_MS
