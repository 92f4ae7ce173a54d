#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the veil runtime configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from veil.config import VeilRuntimeConfig, parse_log_level, parse_mode
from veil.config.defaults import DEFAULT_MODE, MODE_BYTES, MODE_TEXT, WHITESPACE_CODES


class TestVeilRuntimeConfig:
    """Test runtime configuration defaults and environment loading."""

    def test_defaults(self) -> None:
        config = VeilRuntimeConfig()
        assert config.log_level == "WARNING"
        assert config.setup_log_level == "WARNING"
        assert config.default_mode == DEFAULT_MODE == MODE_TEXT
        assert config.strict is False

    @patch.dict(os.environ, {"VEIL_MODE": "bytes", "VEIL_LOG_LEVEL": "debug"})
    def test_from_env(self) -> None:
        config = VeilRuntimeConfig.from_env()
        assert config.default_mode == MODE_BYTES
        assert config.log_level == "DEBUG"

    @patch.dict(os.environ, {"VEIL_STRICT": "true"})
    def test_strict_from_env(self) -> None:
        assert VeilRuntimeConfig.from_env().strict is True

    def test_invalid_mode(self) -> None:
        with pytest.raises(ValueError, match="Invalid mode"):
            VeilRuntimeConfig(default_mode="rot13")

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            VeilRuntimeConfig(log_level="LOUD")


class TestParsers:
    def test_parse_log_level_normalizes(self) -> None:
        assert parse_log_level(" info ") == "INFO"

    def test_parse_mode_normalizes(self) -> None:
        assert parse_mode("TEXT") == MODE_TEXT


def test_whitespace_codes() -> None:
    """Tab, line feed, carriage return and space are never transformed."""
    assert WHITESPACE_CODES == {9, 10, 13, 32}


# 🎭🔑🔚
