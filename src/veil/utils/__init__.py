#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Low-level helpers for code units and XOR."""

from __future__ import annotations

from veil.utils.utf16 import (
    from_code_units,
    to_code_units,
    utf16_length,
)
from veil.utils.xor import (
    xor_bytes,
    xor_units,
)

__all__ = [
    # UTF-16 helpers
    "from_code_units",
    "to_code_units",
    "utf16_length",
    # XOR helpers
    "xor_bytes",
    "xor_units",
]

# 🎭🔑🔚
