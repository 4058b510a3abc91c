# topmark:header:start
#
#   project      : Optsift
#   file         : report.py
#   file_relpath : src/optsift/core/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recording harness producing a full classification report.

`Options` only exposes misuse and exit-early state after a pass; which flags
and keys actually fired is only visible through callbacks. `classify`
registers recording callbacks for a vocabulary, runs one pass and returns an
immutable `ClassificationReport` that reporting layers can render.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from optsift.config.logging import get_logger
from optsift.core.options import Options

if TYPE_CHECKING:
    from optsift.config.logging import OptsiftLogger
    from optsift.config.vocabulary import OptionVocabulary
    from optsift.core.tokens import Tokenizer
    from optsift.diagnostic.model import Diagnostic

logger: OptsiftLogger = get_logger(__name__)


@dataclass(frozen=True)
class KeyValue:
    """A matched key together with the value it consumed."""

    key: str
    value: str


@dataclass(frozen=True)
class ClassificationReport:
    """Outcome of one classification pass.

    Attributes:
        flags: Matched flag names in firing order (cluster members expanded).
        keys: Matched keys with their values, in firing order.
        unrecognized_options: Option-looking tokens that matched nothing.
        keys_not_given_value: Keys that had no following token to consume.
        positional_arguments: Tokens left unclaimed, in original order.
        exit_early: Whether an exit-early option fired.
        diagnostics: Misuse rendered as structured diagnostics.
    """

    flags: tuple[str, ...]
    keys: tuple[KeyValue, ...]
    unrecognized_options: tuple[str, ...]
    keys_not_given_value: tuple[str, ...]
    positional_arguments: tuple[str, ...]
    exit_early: bool
    diagnostics: tuple[Diagnostic, ...]

    @property
    def misused(self) -> bool:
        """Return True if any misuse was recorded."""
        return bool(self.unrecognized_options or self.keys_not_given_value)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this report."""
        return {
            "flags": list(self.flags),
            "keys": [{"key": kv.key, "value": kv.value} for kv in self.keys],
            "unrecognized_options": list(self.unrecognized_options),
            "keys_not_given_value": list(self.keys_not_given_value),
            "positional_arguments": list(self.positional_arguments),
            "exit_early": self.exit_early,
            "misused": self.misused,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


def classify(vocabulary: OptionVocabulary, tokenizer: Tokenizer) -> ClassificationReport:
    """Classify ``tokenizer`` against ``vocabulary`` and record everything that fired.

    Args:
        vocabulary: Flag groups, key groups and exit-early names.
        tokenizer: Tokens of one invocation; claimed in place.

    Returns:
        The classification report.
    """
    flags: list[str] = []
    keys: list[KeyValue] = []

    options = Options()
    vocabulary.apply_to(
        options,
        on_flag=flags.append,
        on_key=lambda key, value: keys.append(KeyValue(key, value)),
    )
    options.recognize_options_in_arguments(tokenizer)

    report = ClassificationReport(
        flags=tuple(flags),
        keys=tuple(keys),
        unrecognized_options=tuple(options.unrecognized_options),
        keys_not_given_value=tuple(options.keys_not_given_value),
        positional_arguments=tuple(tokenizer.unclaimed_in_order()),
        exit_early=options.exit_early,
        diagnostics=tuple(options.describe_misuse()),
    )
    logger.debug("Report: misused=%s exit_early=%s", report.misused, report.exit_early)
    return report
