#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for veiltext."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class VeilError(FoundationError):
    """Base exception for all veil-related errors."""

    pass


class MissingSecretOrSeedError(VeilError, ValueError):
    """Raised when the secret is empty or no seed was supplied."""

    pass


class InvalidSeedError(VeilError, ValueError):
    """Raised when a seed cannot be read as a number."""

    pass


class MissingTextError(VeilError, ValueError):
    """Raised when bytes mode is asked to encode empty text."""

    pass


class DecodingError(VeilError):
    """Raised when bytes-mode ciphertext is not valid base64."""

    pass


class WhitespaceCollisionError(VeilError):
    """Raised by strict text-mode encoding when output lands on whitespace.

    Such output would not decode back to the input, since decoding copies
    whitespace through and the key stream loses its alignment.
    """

    def __init__(self, positions: list[int]) -> None:
        self.positions = positions
        super().__init__(
            f"Encoded text has whitespace collisions at positions {positions}; "
            "it would not decode back to the input"
        )


# 🎭🔑🔚
