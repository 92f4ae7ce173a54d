#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared click options and input validation for veil commands."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

import click

from veil.codec.seed import normalize_seed, parse_seed
from veil.config.defaults import MODE_BYTES, MODE_TEXT
from veil.engine import Mode
from veil.exceptions import InvalidSeedError

SECRET_PROMPT_ERROR = "Please enter a secret."
SEED_PROMPT_ERROR = "Please enter a valid number."


def key_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add --secret, --seed and --mode to a command."""
    func = click.option(
        "--mode",
        "-m",
        type=click.Choice([MODE_TEXT, MODE_BYTES], case_sensitive=False),
        default=None,
        help="Transform to use (default: text, or VEIL_MODE).",
    )(func)
    func = click.option(
        "--seed",
        "-n",
        envvar="VEIL_SEED",
        default=None,
        help="Numeric seed, truncated to a 32-bit integer (or VEIL_SEED).",
    )(func)
    func = click.option(
        "--secret",
        "-s",
        envvar="VEIL_SECRET",
        default=None,
        help="Secret string used as key material (or VEIL_SECRET).",
    )(func)
    return func


def validate_key(secret: str | None, seed: str | None) -> tuple[str, int]:
    """Check secret and seed before calling the engine.

    Raises:
        click.UsageError: With the same messages the web form showed
    """
    if not secret:
        raise click.UsageError(SECRET_PROMPT_ERROR)
    if seed is None or not seed.strip():
        raise click.UsageError(SEED_PROMPT_ERROR)
    try:
        value = parse_seed(seed)
    except InvalidSeedError as e:
        raise click.UsageError(SEED_PROMPT_ERROR) from e
    # NaN and infinity would silently become seed 0
    if isinstance(value, float) and not math.isfinite(value):
        raise click.UsageError(SEED_PROMPT_ERROR)
    return secret, normalize_seed(value)


def resolve_mode(ctx: click.Context, mode: str | None) -> Mode:
    """Pick the --mode value, falling back to the runtime config."""
    if mode is not None:
        return Mode.parse(mode)
    config = (ctx.obj or {}).get("config")
    if config is not None:
        return Mode.parse(config.default_mode)
    return Mode.TEXT


# 🎭🔑🔚
