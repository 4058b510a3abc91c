# topmark:header:start
#
#   project      : Optsift
#   file         : tokens.py
#   file_relpath : src/optsift/core/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tokenization of raw command-line input.

A `Tokenizer` turns a command line (or an already split argument vector) into
an ordered sequence of positionally indexed `Token` objects and tracks which
of them have been *claimed* by the classifier. Whatever is left unclaimed
after classification are the positional arguments.

Claim state is kept in a plain list of booleans indexed in parallel with the
token list; tokens themselves are immutable.

The program-name token (the first element of the raw input) is discarded, so
token indices start at 0 with the first real argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from optsift.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from optsift.config.logging import OptsiftLogger

logger: OptsiftLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Token:
    """A single raw argument.

    Attributes:
        value: Exact text as given, leading dashes included.
        index: Zero-based position in the argument sequence (program name excluded).
    """

    value: str
    index: int

    @property
    def looks_like_option(self) -> bool:
        """Return True if the token starts with a dash."""
        return self.value.startswith("-")


def tokenize(text: str) -> list[str]:
    """Split a raw command line on whitespace.

    No quoting or escaping is honored: any run of whitespace separates two
    tokens and empty substrings are never produced.

    Args:
        text: Raw command-line text.

    Returns:
        The non-empty substrings of ``text`` in order.
    """
    return text.split()


class Tokenizer:
    """Ordered, claim-tracking view over the arguments of one invocation.

    Args:
        arguments: Argument strings, program name already removed.
    """

    def __init__(self, arguments: Iterable[str]) -> None:
        self._tokens: tuple[Token, ...] = tuple(
            Token(value=value, index=i) for i, value in enumerate(arguments)
        )
        self._claimed: list[bool] = [False] * len(self._tokens)

    @classmethod
    def from_string(cls, command_line: str) -> Tokenizer:
        """Build a tokenizer from a whitespace-delimited command line.

        The first token is treated as the program name and dropped.

        Args:
            command_line: Raw command line, e.g. ``"tester -a -b banana"``.

        Returns:
            A tokenizer over the arguments following the program name.
        """
        return cls.from_argv(tokenize(command_line))

    @classmethod
    def from_argv(cls, argv: Iterable[str]) -> Tokenizer:
        """Build a tokenizer from a ``sys.argv``-shaped vector.

        Args:
            argv: Argument vector whose first element is the program name.

        Returns:
            A tokenizer over ``argv[1:]``; elements are kept verbatim.
        """
        arguments = list(argv)[1:]
        logger.trace("Tokenized %d argument(s): %r", len(arguments), arguments)
        return cls(arguments)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"Tokenizer({[t.value for t in self._tokens]!r})"

    def token_at(self, index: int) -> Token | None:
        """Return the token at ``index``, or None when out of range."""
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def claim(self, index: int) -> None:
        """Mark the token at ``index`` as consumed by the classifier.

        Raises:
            IndexError: If ``index`` does not address a token.
        """
        if not 0 <= index < len(self._claimed):
            raise IndexError(f"No token at index {index} (have {len(self._claimed)})")
        self._claimed[index] = True

    def is_claimed(self, index: int) -> bool:
        """Return True if the token at ``index`` has been claimed.

        Out-of-range indices are reported as not claimed.
        """
        return 0 <= index < len(self._claimed) and self._claimed[index]

    def unclaimed_in_order(self) -> list[str]:
        """Return the values of all never-claimed tokens, in original order.

        These are the positional arguments of the invocation.
        """
        return [t.value for t in self._tokens if not self._claimed[t.index]]

    def claimed_in_order(self) -> list[str]:
        """Return the values of all claimed tokens, in original order."""
        return [t.value for t in self._tokens if self._claimed[t.index]]
