#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Encode and decode commands for the veil CLI."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from provide.foundation import logger
from provide.foundation.console import perr, pout

from veil.commands.options import key_options, resolve_mode, validate_key
from veil.engine import decode, encode
from veil.exceptions import VeilError

# Lone surrogates from text mode must survive a file round trip
TEXT_ERRORS = "surrogatepass"


def _read_text(text: str | None, input_path: str | None) -> str:
    if text is not None:
        return text
    if input_path is None or input_path == "-":
        data = sys.stdin.buffer.read()
    else:
        data = Path(input_path).read_bytes()
    return data.decode("utf-8", errors=TEXT_ERRORS)


def _write_text(result: str, output_path: str | None) -> None:
    data = result.encode("utf-8", errors=TEXT_ERRORS)
    if output_path is None or output_path == "-":
        # Newline only for a terminal so piped output decodes back unchanged
        if sys.stdout.isatty():
            data += b"\n"
        stream = sys.stdout.buffer
        stream.write(data)
        stream.flush()
        return

    Path(output_path).write_bytes(data)
    pout(f"✅ Wrote {len(result)} characters to '{output_path}'.")


def _io_options(func):
    func = click.option(
        "--output",
        "-o",
        "output_path",
        type=click.Path(dir_okay=False, writable=True, allow_dash=True),
        default=None,
        help="Write the result here instead of stdout.",
    )(func)
    func = click.option(
        "--input",
        "-i",
        "input_path",
        type=click.Path(exists=True, dir_okay=False, allow_dash=True),
        default=None,
        help="Read text from a file ('-' for stdin) when TEXT is not given.",
    )(func)
    func = click.argument("text", required=False)(func)
    return func


@click.command("encode")
@_io_options
@key_options
@click.option(
    "--strict",
    is_flag=True,
    help="Fail when text-mode output would not decode back (or VEIL_STRICT).",
)
@click.pass_context
def encode_command(
    ctx: click.Context,
    text: str | None,
    input_path: str | None,
    output_path: str | None,
    secret: str | None,
    seed: str | None,
    mode: str | None,
    strict: bool,
) -> None:
    """Encodes TEXT with a secret and a seed."""
    secret, number = validate_key(secret, seed)
    chosen = resolve_mode(ctx, mode)
    config = (ctx.obj or {}).get("config")
    strict = strict or bool(config and config.strict)

    plain = _read_text(text, input_path)
    logger.debug("Encode command started", mode=chosen.value, length=len(plain), strict=strict)

    try:
        result = encode(plain, secret, number, chosen, strict=strict)
    except VeilError as e:
        logger.error("Encode failed", error=str(e), mode=chosen.value)
        perr(f"❌ Encode failed: {e}")
        raise click.Abort() from e

    _write_text(result, output_path)


@click.command("decode")
@_io_options
@key_options
@click.pass_context
def decode_command(
    ctx: click.Context,
    text: str | None,
    input_path: str | None,
    output_path: str | None,
    secret: str | None,
    seed: str | None,
    mode: str | None,
) -> None:
    """Decodes TEXT produced by 'encode' with the same secret and seed."""
    secret, number = validate_key(secret, seed)
    chosen = resolve_mode(ctx, mode)

    encoded = _read_text(text, input_path)
    logger.debug("Decode command started", mode=chosen.value, length=len(encoded))

    try:
        result = decode(encoded, secret, number, chosen)
    except VeilError as e:
        logger.error("Decode failed", error=str(e), mode=chosen.value)
        perr(f"❌ Decode failed: {e}")
        raise click.Abort() from e

    _write_text(result, output_path)


# 🎭🔑🔚
