# topmark:header:start
#
#   project      : Optsift
#   file         : model.py
#   file_relpath : src/optsift/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for Optsift.

The classifier never raises on bad input; it records misuse as plain lists of
option names. This module turns those records into structured diagnostics
that reporting layers (the CLI, JSON output) can render uniformly.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable structured diagnostic payload (level + message + option).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable collection with helpers for adding and summarizing diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from optsift.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from optsift.config.logging import OptsiftLogger


logger: OptsiftLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during classification.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, a message and the option involved.

    Attributes:
        level: Severity.
        message: Human-readable message.
        option: The offending option text, or None for diagnostics about the
            invocation as a whole.
    """

    level: DiagnosticLevel
    message: str
    option: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Return a JSON-friendly mapping of this diagnostic."""
        return {"level": self.level.value, "message": self.message, "option": self.option}


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics, in insertion order."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str, *, option: str | None = None) -> None:
        """Add an ``info`` diagnostic to the log.

        Args:
            message: The diagnostic message.
            option: The option the diagnostic is about, if any.
        """
        self._add(Diagnostic(DiagnosticLevel.INFO, message, option))

    def add_warning(self, message: str, *, option: str | None = None) -> None:
        """Add a ``warning`` diagnostic to the log.

        Args:
            message: The diagnostic message.
            option: The option the diagnostic is about, if any.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message, option))

    def add_error(self, message: str, *, option: str | None = None) -> None:
        """Add an ``error`` diagnostic to the log.

        Args:
            message: The diagnostic message.
            option: The option the diagnostic is about, if any.
        """
        self._add(Diagnostic(DiagnosticLevel.ERROR, message, option))

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity.

        Returns:
            Mapping with keys ``"info"``, ``"warning"``, and ``"error"``
            reflecting the number of diagnostics at each level.
        """
        stats: DiagnosticStats = self.stats()
        return {
            "info": stats.n_info,
            "warning": stats.n_warning,
            "error": stats.n_error,
        }

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-level counts.
    """
    items = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)
