#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Key stream inspection command for the veil CLI."""

from __future__ import annotations

from itertools import islice

import click
from provide.foundation import logger
from provide.foundation.console import pout

from veil.codec.seed import seed_hash, xorshift32
from veil.codec.text import keystream
from veil.commands.options import key_options, resolve_mode, validate_key
from veil.config.defaults import BYTE_MASK
from veil.engine import Mode


@click.command("keystream")
@key_options
@click.option(
    "--length",
    "-l",
    type=click.IntRange(min=0),
    default=16,
    show_default=True,
    help="Number of key stream values to print.",
)
@click.pass_context
def keystream_command(
    ctx: click.Context,
    secret: str | None,
    seed: str | None,
    mode: str | None,
    length: int,
) -> None:
    """Prints the first key stream values for a secret and seed."""
    secret, number = validate_key(secret, seed)
    chosen = resolve_mode(ctx, mode)
    logger.debug("Keystream command started", mode=chosen.value, length=length)

    if chosen is Mode.BYTES:
        values = [draw & BYTE_MASK for draw in islice(xorshift32(seed_hash(secret, number)), length)]
    else:
        values = keystream(secret, number, length)

    pout(" ".join(str(value) for value in values))


# 🎭🔑🔚
