# topmark:header:start
#
#   project      : Optsift
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Optsift test suite.

Sets up global fixtures and TRACE-level logging so every classification
decision is visible in captured logs when a test fails.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, TypeVar, cast

import pytest

from optsift.config.logging import LOG_LEVEL_ENV_VAR, TRACE_LEVEL, setup_logging
from optsift.core.options import Options

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


@pytest.fixture(autouse=True)
def silence_optsift_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Optsift's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the log level variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE for all tests so failures show every classification step."""
    setup_logging(level=TRACE_LEVEL)


@dataclass
class CallRecorder:
    """Records callback invocations in order.

    ``calls`` holds ``(name,)`` tuples for flags and ``(name, value)`` tuples for keys.
    """

    calls: list[tuple[str, ...]] = field(default_factory=lambda: [])

    def flag(self, name: str) -> None:
        """Flag callback."""
        self.calls.append((name,))

    def key(self, name: str, value: str) -> None:
        """Key callback."""
        self.calls.append((name, value))


@pytest.fixture
def options() -> Options:
    """Return a fresh, empty option registry."""
    return Options()


@pytest.fixture
def recorder() -> CallRecorder:
    """Return a fresh callback recorder."""
    return CallRecorder()


@pytest.fixture
def write_vocabulary(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing a vocabulary TOML file under ``tmp_path``."""

    def _write(text: str) -> Path:
        path = tmp_path / "options.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
