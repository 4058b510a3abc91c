# topmark:header:start
#
#   project      : Optsift
#   file         : classify.py
#   file_relpath : src/optsift/cli/commands/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Optsift `classify` command.

Builds an option vocabulary from a TOML file and/or ``--flag``/``--key``
options, classifies an argument vector against it and prints the result.

Exit status is `ExitCode.SUCCESS` when no misuse was found and
`ExitCode.USAGE_ERROR` otherwise, so the command can be used in scripts to
check an invocation against a vocabulary.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from optsift.cli.emitters import emit_report_default, emit_report_json, emit_report_markdown
from optsift.cli.errors import OptsiftConfigError, OptsiftUsageError
from optsift.cli.exit_codes import ExitCode
from optsift.cli.options import OutputFormat, output_format_option, split_alias_group
from optsift.config.loaders import load_vocabulary
from optsift.config.logging import get_logger
from optsift.config.vocabulary import OptionVocabulary, VocabularyError
from optsift.core.report import classify
from optsift.core.tokens import Tokenizer

if TYPE_CHECKING:
    from optsift.cli.console import ConsoleLike
    from optsift.config.logging import OptsiftLogger

logger: OptsiftLogger = get_logger(__name__)


def build_vocabulary(
    vocabulary_path: Path | None,
    flag_groups: tuple[str, ...],
    key_groups: tuple[str, ...],
    exit_early: tuple[str, ...],
) -> OptionVocabulary:
    """Combine the vocabulary file (if any) with groups given on the command line.

    Command-line groups are registered after the file's, so they win on
    conflicting aliases of the same kind.

    Raises:
        OptsiftConfigError: If the vocabulary file cannot be loaded.
        OptsiftUsageError: If a command-line group is empty or invalid.
    """
    vocabulary = OptionVocabulary()
    if vocabulary_path is not None:
        try:
            vocabulary = load_vocabulary(vocabulary_path)
        except VocabularyError as exc:
            raise OptsiftConfigError(str(exc)) from exc

    try:
        from_cli = OptionVocabulary.from_groups(
            flags=[split_alias_group(g) for g in flag_groups],
            keys=[split_alias_group(g) for g in key_groups],
            exit_early=list(exit_early),
        )
    except VocabularyError as exc:
        raise OptsiftUsageError(str(exc)) from exc

    return vocabulary.merge(from_cli)


@click.command(
    name="classify",
    context_settings={"ignore_unknown_options": True},
    help=(
        "Classify ARGS (or --command-line) against an option vocabulary. "
        "Put '--' before ARGS so they are not read as options of this command."
    ),
)
@click.option(
    "--vocabulary",
    "vocabulary_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="TOML file declaring [flags], [keys] and [behavior].exit_early.",
)
@click.option(
    "--flag",
    "flag_groups",
    multiple=True,
    metavar="NAMES",
    help="Register a flag alias group, comma-separated (e.g. --flag=-a,--awesome).",
)
@click.option(
    "--key",
    "key_groups",
    multiple=True,
    metavar="NAMES",
    help="Register a key alias group, comma-separated (e.g. --key=-o,--output).",
)
@click.option(
    "--exit-early",
    "exit_early",
    multiple=True,
    metavar="NAME",
    help="Mark an option name as exit-early (e.g. --exit-early=-h).",
)
@click.option(
    "--command-line",
    "command_line",
    default=None,
    help="Classify a whole command line instead of ARGS; its first word is the program name.",
)
@output_format_option
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
def classify_command(
    *,
    vocabulary_path: Path | None,
    flag_groups: tuple[str, ...],
    key_groups: tuple[str, ...],
    exit_early: tuple[str, ...],
    command_line: str | None,
    output_format: OutputFormat | None,
    arguments: tuple[str, ...],
) -> None:
    """Classify an argument vector and print the report."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if arguments and command_line is not None:
        raise OptsiftUsageError("Pass either ARGS or --command-line, not both.")

    vocabulary = build_vocabulary(vocabulary_path, flag_groups, key_groups, exit_early)
    if not vocabulary.registered_names():
        logger.warning("Empty vocabulary: every option will be unrecognized")

    tokenizer = (
        Tokenizer.from_string(command_line) if command_line is not None else Tokenizer(arguments)
    )
    report = classify(vocabulary, tokenizer)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        emit_report_json(console, report)
    elif fmt == OutputFormat.MARKDOWN:
        emit_report_markdown(console, report)
    else:
        emit_report_default(console, report, verbosity=ctx.obj.get("verbosity_level", 0))

    ctx.exit(ExitCode.USAGE_ERROR if report.misused else ExitCode.SUCCESS)
