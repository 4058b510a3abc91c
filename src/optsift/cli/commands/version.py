# topmark:header:start
#
#   project      : Optsift
#   file         : version.py
#   file_relpath : src/optsift/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Optsift `version` command.

Prints the current Optsift version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from optsift.cli.options import OutputFormat, output_format_option
from optsift.constants import OPTSIFT_VERSION

if TYPE_CHECKING:
    from optsift.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Optsift.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Optsift.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": OPTSIFT_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# Optsift Version\n")
        console.print(f"**Optsift version: {OPTSIFT_VERSION}**")
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("Optsift version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(OPTSIFT_VERSION, bold=True)}")
    else:
        console.print(console.styled(OPTSIFT_VERSION, bold=True))
