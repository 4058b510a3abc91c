# topmark:header:start
#
#   project      : Optsift
#   file         : test_diagnostic_model.py
#   file_relpath : tests/diagnostic/test_diagnostic_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `optsift.diagnostic.model`."""

from __future__ import annotations

from optsift.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    compute_diagnostic_stats,
)


def test_log_keeps_insertion_order_and_counts() -> None:
    """Diagnostics are kept in order and counted per level."""
    log = DiagnosticLog()
    log.add_error("Unrecognized option: -x", option="-x")
    log.add_info("An exit-early option was given")
    log.add_warning("Odd but fine")
    log.add_error("Required value for key not given: -o", option="-o")

    assert [d.level for d in log] == [
        DiagnosticLevel.ERROR,
        DiagnosticLevel.INFO,
        DiagnosticLevel.WARNING,
        DiagnosticLevel.ERROR,
    ]
    assert len(log) == 4
    assert log.has_error()
    assert log.to_dict() == {"info": 1, "warning": 1, "error": 2}
    assert log.stats().total == 4


def test_empty_log_has_no_error() -> None:
    """A fresh log is empty."""
    log = DiagnosticLog()

    assert len(log) == 0
    assert not log.has_error()
    assert log.to_dict() == {"info": 0, "warning": 0, "error": 0}


def test_diagnostic_to_dict() -> None:
    """`to_dict` exposes the level value, message and option."""
    diagnostic = Diagnostic(DiagnosticLevel.WARNING, "careful")

    assert diagnostic.to_dict() == {"level": "warning", "message": "careful", "option": None}


def test_compute_stats_accepts_any_iterable() -> None:
    """Stats can be computed from a generator."""
    stats = compute_diagnostic_stats(
        Diagnostic(DiagnosticLevel.INFO, str(i)) for i in range(3)
    )

    assert (stats.n_info, stats.n_warning, stats.n_error) == (3, 0, 0)


def test_levels_have_color_functions() -> None:
    """Every level maps to a callable color."""
    for level in DiagnosticLevel:
        assert "text" in level.color("text")
