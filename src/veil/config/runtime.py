#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""veiltext runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from veil.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MODE,
    DEFAULT_SETUP_LOG_LEVEL,
    MODE_BYTES,
    MODE_TEXT,
)

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_MODES = {MODE_TEXT, MODE_BYTES}
TRUTHY_VALUES = {"1", "true", "yes", "on"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_mode(value: str) -> str:
    """Validate and normalize the transform mode name."""
    normalized = value.strip().lower()
    if normalized not in VALID_MODES:
        raise ValueError(f"Invalid mode: {value}")
    return normalized


def parse_flag(value: str | bool) -> bool:
    if isinstance(value, bool):
        return value
    return value.strip().lower() in TRUTHY_VALUES


@define
class VeilRuntimeConfig(RuntimeConfig):
    """veiltext runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="VEIL_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for veil operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default=DEFAULT_SETUP_LOG_LEVEL,
        env_var="VEIL_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    default_mode: str = field(
        default=DEFAULT_MODE,
        env_var="VEIL_MODE",
        converter=parse_mode,
        metadata={"help": "Transform used when --mode is not given (text, bytes)"},
    )

    strict: bool = field(
        default=False,
        env_var="VEIL_STRICT",
        converter=parse_flag,
        metadata={"help": "Refuse text-mode output that would not decode back"},
    )


# 🎭🔑🔚
