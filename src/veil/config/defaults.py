#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values and constants for veiltext."""

from __future__ import annotations

# =================================
# Modes
# =================================
MODE_TEXT = "text"  # Whitespace-preserving character XOR
MODE_BYTES = "bytes"  # UTF-8 bytes XOR, base64 framed
DEFAULT_MODE = MODE_TEXT

# =================================
# Seed normalization
# =================================
INT32_MODULUS = 1 << 32
INT32_SIGN_BIT = 1 << 31
UINT32_MASK = 0xFFFFFFFF

# =================================
# Text mode
# =================================
# Tab, line feed, carriage return, space
WHITESPACE_CODES = frozenset({9, 10, 13, 32})
KEYSTREAM_MODULUS = 1 << 16
CODE_UNIT_MASK = 0xFFFF

# =================================
# UTF-16 surrogates
# =================================
HIGH_SURROGATE_START = 0xD800
LOW_SURROGATE_START = 0xDC00
SURROGATE_END = 0xDFFF
SUPPLEMENTARY_START = 0x10000

# =================================
# Bytes mode
# =================================
SEED_HASH_MULTIPLIER = 31
XORSHIFT_SHIFTS = (13, 17, 5)
BYTE_MASK = 0xFF

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SETUP_LOG_LEVEL = "WARNING"

# 🎭🔑🔚
