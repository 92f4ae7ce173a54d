#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""veiltext configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from veil.config.runtime import VeilRuntimeConfig, parse_log_level, parse_mode

__all__ = [
    "VeilRuntimeConfig",
    "parse_log_level",
    "parse_mode",
]

# 🎭🔑🔚
