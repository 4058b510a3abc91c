# topmark:header:start
#
#   project      : Optsift
#   file         : main.py
#   file_relpath : src/optsift/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Optsift CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from optsift.cli.commands.classify import classify_command
from optsift.cli.commands.version import version_command
from optsift.cli.console import ClickConsole
from optsift.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from optsift.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from optsift.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    ``OPTSIFT_LOG_LEVEL`` takes precedence over ``-v``/``-q`` for internal
    logging. Without either, only critical log records are shown.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose

    level_env = resolve_env_log_level()
    if level_env is not None:
        log_level: int | None = level_env
    elif verbose or quiet:
        log_level = level_cli
    else:
        log_level = None
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Optsift CLI: inspect how command-line arguments are classified.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Optsift CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'optsift classify --flag=-a -- -a ARG' to classify arguments.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(classify_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
