#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the veil CLI."""

from __future__ import annotations

from veil.commands.keystream import keystream_command
from veil.commands.transform import decode_command, encode_command

__all__ = [
    "decode_command",
    "encode_command",
    "keystream_command",
]

# 🎭🔑🔚
