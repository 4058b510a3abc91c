# topmark:header:start
#
#   project      : Optsift
#   file         : vocabulary.py
#   file_relpath : src/optsift/config/vocabulary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option vocabularies: the flags, keys and exit-early names a command understands.

An `OptionVocabulary` is a frozen description that can be built from a TOML
table (see `optsift.config.keys.Toml` for the layout), merged with groups
given on the command line, and applied to an `Options` registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, cast

from optsift.config.keys import Toml
from optsift.config.logging import get_logger
from optsift.core.options import OptionKind

if TYPE_CHECKING:
    from optsift.config.logging import OptsiftLogger
    from optsift.config.types import TomlTable
    from optsift.core.options import FlagCallback, KeyCallback, Options

logger: OptsiftLogger = get_logger(__name__)


class VocabularyError(ValueError):
    """Raised when a vocabulary source is unreadable or malformed."""


@dataclass(frozen=True)
class OptionGroup:
    """Aliases registered together under one callback.

    Attributes:
        label: Human label (the TOML key, or the first alias for CLI groups).
        kind: Flag or key.
        names: Aliases in declaration order.
    """

    label: str
    kind: OptionKind
    names: tuple[str, ...]


@dataclass(frozen=True)
class OptionVocabulary:
    """Immutable set of option groups plus exit-early names."""

    flags: tuple[OptionGroup, ...] = ()
    keys: tuple[OptionGroup, ...] = ()
    exit_early: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_table(cls, table: TomlTable, *, source: str = "<table>") -> OptionVocabulary:
        """Build a vocabulary from a parsed TOML table.

        Args:
            table: Parsed document.
            source: Where the table came from, used in error messages.

        Returns:
            The vocabulary described by ``table``.

        Raises:
            VocabularyError: If a section or value has the wrong shape, or an
                option name does not start with a dash.
        """
        for section in table:
            if section not in Toml.ALL_SECTIONS:
                logger.warning("%s: ignoring unknown section [%s]", source, section)

        flags = _groups_from_section(table, Toml.SECTION_FLAGS, OptionKind.FLAG, source)
        keys = _groups_from_section(table, Toml.SECTION_KEYS, OptionKind.KEY, source)

        behavior = _section(table, Toml.SECTION_BEHAVIOR, source)
        exit_early: frozenset[str] = frozenset()
        if Toml.KEY_EXIT_EARLY in behavior:
            exit_early = frozenset(
                _names(
                    behavior[Toml.KEY_EXIT_EARLY],
                    f"{Toml.SECTION_BEHAVIOR}.{Toml.KEY_EXIT_EARLY}",
                    source,
                    allow_empty=True,
                )
            )

        vocabulary = cls(flags=flags, keys=keys, exit_early=exit_early)
        for name in sorted(vocabulary.exit_early - vocabulary.registered_names()):
            logger.warning("%s: exit-early option %r is not a registered flag or key", source, name)
        return vocabulary

    @classmethod
    def from_groups(
        cls,
        *,
        flags: list[list[str]] | None = None,
        keys: list[list[str]] | None = None,
        exit_early: list[str] | None = None,
    ) -> OptionVocabulary:
        """Build a vocabulary from plain alias lists (e.g. CLI options).

        Raises:
            VocabularyError: If a group is empty or a name does not start with a dash.
        """
        return cls(
            flags=tuple(
                OptionGroup(g[0] if g else "", OptionKind.FLAG, _names(g, "--flag", "<cli>"))
                for g in flags or []
            ),
            keys=tuple(
                OptionGroup(g[0] if g else "", OptionKind.KEY, _names(g, "--key", "<cli>"))
                for g in keys or []
            ),
            exit_early=frozenset(_names(exit_early or [], "--exit-early", "<cli>", allow_empty=True)),
        )

    def merge(self, other: OptionVocabulary) -> OptionVocabulary:
        """Return a vocabulary with ``other``'s groups registered after this one's.

        Registration is last-wins per kind, so a flag alias in ``other``
        replaces the same flag alias here (likewise for keys). A name that
        ends up both a flag and a key classifies as a flag.
        """
        return OptionVocabulary(
            flags=self.flags + other.flags,
            keys=self.keys + other.keys,
            exit_early=self.exit_early | other.exit_early,
        )

    def registered_names(self) -> frozenset[str]:
        """Return every alias of every flag and key group."""
        return frozenset(name for group in self.flags + self.keys for name in group.names)

    def apply_to(
        self,
        options: Options,
        *,
        on_flag: FlagCallback | None = None,
        on_key: KeyCallback | None = None,
    ) -> None:
        """Register this vocabulary on ``options``.

        Args:
            options: Registry to populate.
            on_flag: Callback shared by all flag groups.
            on_key: Callback shared by all key groups.
        """
        for group in self.flags:
            options.on_flags(group.names, on_flag)
        for group in self.keys:
            options.on_keys(group.names, on_key)
        options.exit_early_options = self.exit_early

    def to_dict(self) -> dict[str, Any]:
        """Return a TOML/JSON-friendly mapping in the vocabulary file layout."""
        return {
            Toml.SECTION_FLAGS: {g.label: list(g.names) for g in self.flags},
            Toml.SECTION_KEYS: {g.label: list(g.names) for g in self.keys},
            Toml.SECTION_BEHAVIOR: {Toml.KEY_EXIT_EARLY: sorted(self.exit_early)},
        }


def _section(table: TomlTable, name: str, source: str) -> TomlTable:
    value: Any = table.get(name, {})
    if not isinstance(value, dict):
        raise VocabularyError(f"{source}: [{name}] must be a table, got {type(value).__name__}")
    return cast("TomlTable", value)


def _groups_from_section(
    table: TomlTable, name: str, kind: OptionKind, source: str
) -> tuple[OptionGroup, ...]:
    section = _section(table, name, source)
    return tuple(
        OptionGroup(label=label, kind=kind, names=_names(value, f"{name}.{label}", source))
        for label, value in section.items()
    )


def _names(value: Any, where: str, source: str, *, allow_empty: bool = False) -> tuple[str, ...]:
    """Validate an alias group; a bare string is a one-alias group."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise VocabularyError(
            f"{source}: {where} must be a string or a list of strings, got {type(value).__name__}"
        )
    items = cast("list[Any]", value)
    if not items and not allow_empty:
        raise VocabularyError(f"{source}: {where} must name at least one option")
    for item in items:
        if not isinstance(item, str) or not item.startswith("-") or any(c.isspace() for c in item):
            raise VocabularyError(f"{source}: {where}: invalid option name {item!r}")
    return tuple(cast("list[str]", items))
