# topmark:header:start
#
#   project      : Optsift
#   file         : options.py
#   file_relpath : src/optsift/core/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option registry and single-pass classifier.

`Options` owns the option vocabulary of a command (flags and keys, each
possibly registered under several aliases) and classifies the tokens of a
`Tokenizer` in one forward pass:

1. an exact flag match claims the token and fires the flag callback;
2. an exact key match claims the token *and* the token that follows it,
   firing the key callback with that value;
3. a single-dash cluster such as ``-ab`` is expanded into ``-a`` and ``-b``
   when every member is a registered flag;
4. anything else that starts with a dash is claimed as unrecognized.

Tokens that do not start with a dash are left alone; they are the positional
arguments. Misuse is recorded in `unrecognized_options` and
`keys_not_given_value` rather than raised, so callers always get a complete
classification. Callbacks run synchronously, in token order; an exception
raised by a callback propagates to the caller as-is.

Typical usage:
    ```python
    options = Options()
    options.on_flags(["-v", "--verbose"], lambda flag: ...)
    options.on_keys(["-o", "--output"], lambda key, value: ...)
    options.exit_early_options = {"-h", "--help"}

    tokens = Tokenizer.from_argv(sys.argv)
    options.recognize_options_in_arguments(tokens)
    if options.misused_options_present() or options.exit_early:
        ...
    positional = tokens.unclaimed_in_order()
    ```
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable

from optsift.config.logging import get_logger
from optsift.diagnostic.model import DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from optsift.config.logging import OptsiftLogger
    from optsift.core.tokens import Token, Tokenizer

logger: OptsiftLogger = get_logger(__name__)

FlagCallback = Callable[[str], None]
"""Called with the matched flag name."""

KeyCallback = Callable[[str, str], None]
"""Called with the matched key name and its value."""


class OptionKind(str, Enum):
    """How an option consumes arguments."""

    FLAG = "flag"
    KEY = "key"


class Options:
    """Registry of recognized options plus the results of the last classification pass.

    Attributes:
        exit_early: Set once any option listed in `exit_early_options` has been
            matched. The classifier never clears it; callers may reset it (or
            call `reset_results`) before reusing the registry.
        unrecognized_options: Option-looking tokens that matched nothing, in
            the order they were encountered.
        keys_not_given_value: Key names that matched but had no following
            unclaimed token to use as a value, in the order they were encountered.
    """

    def __init__(self) -> None:
        self._flag_options: dict[str, FlagCallback | None] = {}
        self._key_options: dict[str, KeyCallback | None] = {}
        self._exit_early_options: frozenset[str] = frozenset()

        self.exit_early: bool = False
        self.unrecognized_options: list[str] = []
        self.keys_not_given_value: list[str] = []

    # --- Registration ---

    def on_flags(self, names: Iterable[str], callback: FlagCallback | None = None) -> None:
        """Register flag aliases sharing one callback.

        A name registered before is overwritten (last registration wins).

        Args:
            names: Option names, e.g. ``["-a", "--awesome"]``.
            callback: Called with the matched name; ``None`` records the flag
                as recognized without doing anything.
        """
        for name in names:
            self._flag_options[name] = callback
            logger.trace("Registered flag %r (callback: %s)", name, callback is not None)

    def on_keys(self, names: Iterable[str], callback: KeyCallback | None = None) -> None:
        """Register key aliases sharing one callback.

        A name registered before is overwritten (last registration wins).

        Args:
            names: Option names, e.g. ``["-o", "--output"]``.
            callback: Called with the matched name and its value; ``None``
                records the key as recognized without doing anything.
        """
        for name in names:
            self._key_options[name] = callback
            logger.trace("Registered key %r (callback: %s)", name, callback is not None)

    @property
    def exit_early_options(self) -> frozenset[str]:
        """Option names that set `exit_early` when matched."""
        return self._exit_early_options

    @exit_early_options.setter
    def exit_early_options(self, names: Iterable[str]) -> None:
        self._exit_early_options = frozenset(names)

    @property
    def all_flag_options(self) -> Mapping[str, FlagCallback | None]:
        """Read-only view of registered flags, keyed by every alias."""
        return MappingProxyType(self._flag_options)

    @property
    def all_key_options(self) -> Mapping[str, KeyCallback | None]:
        """Read-only view of registered keys, keyed by every alias."""
        return MappingProxyType(self._key_options)

    def kind_of(self, name: str) -> OptionKind | None:
        """Return how ``name`` is registered, or None if it is not.

        A name registered both ways reports as a flag, matching classification precedence.
        """
        if name in self._flag_options:
            return OptionKind.FLAG
        if name in self._key_options:
            return OptionKind.KEY
        return None

    # --- Classification ---

    def recognize_options_in_arguments(self, tokenizer: Tokenizer) -> None:
        """Classify every option-looking token of ``tokenizer`` in one forward pass.

        Claims flags, keys and key values on ``tokenizer``, fires callbacks and
        appends misuse to `unrecognized_options` / `keys_not_given_value`.
        Setting `exit_early` does not stop the pass.

        Args:
            tokenizer: Tokens of one invocation. Its claim state is mutated.
        """
        logger.debug("Classifying %d token(s)", len(tokenizer))
        for token in tokenizer:
            if tokenizer.is_claimed(token.index) or not token.looks_like_option:
                continue

            if token.value in self._flag_options:
                tokenizer.claim(token.index)
                self._fire_flag(token.value)
            elif token.value in self._key_options:
                tokenizer.claim(token.index)
                self._consume_key(token, tokenizer)
            elif self._is_flag_cluster(token.value):
                tokenizer.claim(token.index)
                logger.trace("Splitting cluster %r", token.value)
                for flag in _split_cluster(token.value):
                    self._fire_flag(flag)
            else:
                tokenizer.claim(token.index)
                logger.trace("Unrecognized option %r at %d", token.value, token.index)
                self.unrecognized_options.append(token.value)

        logger.debug(
            "Classification done: %d unrecognized, %d key(s) without value, exit_early=%s",
            len(self.unrecognized_options),
            len(self.keys_not_given_value),
            self.exit_early,
        )

    def _fire_flag(self, name: str) -> None:
        logger.trace("Flag %r", name)
        callback = self._flag_options[name]
        if callback is not None:
            callback(name)
        self._check_exit_early(name)

    def _consume_key(self, token: Token, tokenizer: Tokenizer) -> None:
        value_index = token.index + 1
        value_token = tokenizer.token_at(value_index)
        if value_token is None or tokenizer.is_claimed(value_index):
            logger.trace("Key %r at %d has no value", token.value, token.index)
            self.keys_not_given_value.append(token.value)
            return

        tokenizer.claim(value_index)
        logger.trace("Key %r = %r", token.value, value_token.value)
        callback = self._key_options[token.value]
        if callback is not None:
            callback(token.value, value_token.value)
        self._check_exit_early(token.value)

    def _check_exit_early(self, name: str) -> None:
        if name in self._exit_early_options:
            logger.trace("Exit-early option %r matched", name)
            self.exit_early = True

    def _is_flag_cluster(self, value: str) -> bool:
        if len(value) <= 2 or value.startswith("--"):
            return False
        return all(flag in self._flag_options for flag in _split_cluster(value))

    # --- Results ---

    def misused_options_present(self) -> bool:
        """Return True if any option was unrecognized or any key lacked its value."""
        return bool(self.unrecognized_options or self.keys_not_given_value)

    def describe_misuse(self) -> DiagnosticLog:
        """Return the results of the last pass as structured diagnostics.

        Unrecognized options and keys without value become ERROR diagnostics,
        in the order they were recorded. A triggered exit-early adds an INFO
        diagnostic.
        """
        log = DiagnosticLog()
        for option in self.unrecognized_options:
            log.add_error(f"Unrecognized option: {option}", option=option)
        for key in self.keys_not_given_value:
            log.add_error(f"Required value for key not given: {key}", option=key)
        if self.exit_early:
            log.add_info("An exit-early option was given")
        return log

    def reset_results(self) -> None:
        """Clear `exit_early` and the misuse lists; registrations are kept."""
        self.exit_early = False
        self.unrecognized_options = []
        self.keys_not_given_value = []


def _split_cluster(value: str) -> list[str]:
    """Return ``-a``, ``-b``, ... for each character after the leading dash of ``value``."""
    return [f"-{char}" for char in value[1:]]
