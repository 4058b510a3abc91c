# topmark:header:start
#
#   project      : Optsift
#   file         : keys.py
#   file_relpath : src/optsift/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for option vocabulary files.

Keys defined here are the external format of vocabulary files; renaming or
removing one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by vocabulary files.

    Example document:
        ```toml
        [flags]
        help = ["-h", "--help"]

        [keys]
        output = ["-o", "--output"]

        [behavior]
        exit_early = ["-h", "--help"]
        ```
    """

    # [flags]: label -> alias group
    SECTION_FLAGS: Final[str] = "flags"

    # [keys]: label -> alias group
    SECTION_KEYS: Final[str] = "keys"

    # [behavior]
    SECTION_BEHAVIOR: Final[str] = "behavior"

    KEY_EXIT_EARLY: Final[str] = "exit_early"

    ALL_SECTIONS: Final[frozenset[str]] = frozenset(
        {SECTION_FLAGS, SECTION_KEYS, SECTION_BEHAVIOR}
    )
