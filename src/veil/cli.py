#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""veil command-line interface entrypoint."""

from __future__ import annotations

import os
import sys

from attrs import evolve
import click
from provide.foundation import TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from veil.commands.keystream import keystream_command
from veil.commands.transform import decode_command, encode_command
from veil.config import VeilRuntimeConfig

# Encoded text is rarely ASCII; make the Windows console speak UTF-8
if sys.platform == "win32" and not os.environ.get("PYTHONIOENCODING"):
    os.environ["PYTHONIOENCODING"] = "utf-8"

__version__ = get_version("veiltext", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="veil",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Reversibly obfuscate text with a secret and a number.

    Secret and seed can be given with --secret/--seed or through the
    VEIL_SECRET and VEIL_SEED environment variables.

    Configure behavior via environment variables:
    - VEIL_MODE: Default transform (text, bytes)
    - VEIL_STRICT: Refuse text-mode output that would not decode back
    - VEIL_LOG_LEVEL: Set log level (trace, debug, info, warning, error)
    - VEIL_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    """
    ctx.ensure_object(dict)

    veil_config = VeilRuntimeConfig.from_env()

    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="veiltext",
        logging=evolve(
            base_telemetry.logging,
            default_level=veil_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["config"] = veil_config


cli.add_command(encode_command, name="encode")
cli.add_command(decode_command, name="decode")
cli.add_command(keystream_command, name="keystream")

main = cli

if __name__ == "__main__":
    cli()

# 🎭🔑🔚
