# topmark:header:start
#
#   project      : Optsift
#   file         : errors.py
#   file_relpath : src/optsift/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Optsift CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. They prefer the project console if one is present in the Click
context (see `show()`), and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from optsift.cli.exit_codes import ExitCode


class OptsiftError(click.ClickException):
    """Base class for all Optsift CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class OptsiftUsageError(OptsiftError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class OptsiftConfigError(OptsiftError):
    """Error for vocabulary errors (missing/invalid/malformed file)."""

    exit_code = ExitCode.CONFIG_ERROR
