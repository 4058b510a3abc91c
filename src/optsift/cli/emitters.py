# topmark:header:start
#
#   project      : Optsift
#   file         : emitters.py
#   file_relpath : src/optsift/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render classification reports for the console.

One emitter per `OutputFormat`. Emitters only write program output; they do
not decide exit codes.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optsift.cli.console import ConsoleLike
    from optsift.core.report import ClassificationReport


def _join(items: tuple[str, ...] | list[str]) -> str:
    return ", ".join(items) if items else "-"


def emit_report_default(
    console: ConsoleLike, report: ClassificationReport, *, verbosity: int = 0
) -> None:
    """Emit a human-readable report, one row per category.

    Args:
        console: Output console.
        report: Report to render.
        verbosity: When > 0, also list the diagnostics one per line.
    """
    rows: list[tuple[str, str]] = [
        ("Flags", _join(report.flags)),
        ("Keys", _join([f"{kv.key} = {kv.value}" for kv in report.keys])),
        ("Positional", _join(report.positional_arguments)),
    ]
    if report.unrecognized_options:
        rows.append(("Unrecognized", _join(report.unrecognized_options)))
    if report.keys_not_given_value:
        rows.append(("Missing value", _join(report.keys_not_given_value)))
    rows.append(("Exit early", "yes" if report.exit_early else "no"))

    width = max(len(label) for label, _ in rows) + 1
    for label, value in rows:
        console.print(f"{console.styled(f'{label}:'.ljust(width), bold=True)} {value}")

    if report.misused:
        console.print(console.styled("Misused options present.", fg="red", bold=True))

    if verbosity > 0 and report.diagnostics:
        console.print()
        for diagnostic in report.diagnostics:
            line = f"[{diagnostic.level.value}] {diagnostic.message}"
            console.print(diagnostic.level.color(line) if console.enable_color else line)


def emit_report_json(console: ConsoleLike, report: ClassificationReport) -> None:
    """Emit the report as a single JSON object."""
    console.print(json.dumps(report.to_dict(), indent=2))


def emit_report_markdown(console: ConsoleLike, report: ClassificationReport) -> None:
    """Emit the report as a Markdown document."""

    def code(items: tuple[str, ...] | list[str]) -> str:
        return ", ".join(f"`{item}`" for item in items) if items else "_none_"

    console.print("# Classification\n")
    console.print("| Category | Tokens |")
    console.print("| --- | --- |")
    console.print(f"| Flags | {code(report.flags)} |")
    console.print(f"| Keys | {code([f'{kv.key} {kv.value}' for kv in report.keys])} |")
    console.print(f"| Positional | {code(report.positional_arguments)} |")
    console.print(f"| Unrecognized | {code(report.unrecognized_options)} |")
    console.print(f"| Missing value | {code(report.keys_not_given_value)} |")
    console.print(f"| Exit early | {'yes' if report.exit_early else 'no'} |")

    if report.diagnostics:
        console.print("\n## Diagnostics\n")
        for diagnostic in report.diagnostics:
            console.print(f"- **{diagnostic.level.value}**: {diagnostic.message}")
