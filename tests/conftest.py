#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for veil tests."""

from __future__ import annotations

from collections.abc import Iterator

from hypothesis import HealthCheck, settings
import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

# The autouse logging reset below is function scoped and safe to share
settings.register_profile("veil", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("veil")


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def clean_veil_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's VEIL_* variables out of the tests."""
    for name in (
        "VEIL_SECRET",
        "VEIL_SEED",
        "VEIL_MODE",
        "VEIL_STRICT",
        "VEIL_LOG_LEVEL",
        "VEIL_SETUP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


# 🎭🔑🔚
