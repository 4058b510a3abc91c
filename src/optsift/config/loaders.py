# topmark:header:start
#
#   project      : Optsift
#   file         : loaders.py
#   file_relpath : src/optsift/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load option vocabularies from TOML.

Parsing is done with `tomlkit` and returned as plain `dict` structures before
being validated into an `OptionVocabulary`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from optsift.config.logging import get_logger
from optsift.config.vocabulary import OptionVocabulary, VocabularyError

if TYPE_CHECKING:
    from pathlib import Path

    from optsift.config.logging import OptsiftLogger
    from optsift.config.types import TomlTable

logger: OptsiftLogger = get_logger(__name__)


def parse_toml_text(text: str, *, source: str = "<text>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text: TOML document text.
        source: Name used in error messages.

    Returns:
        The parsed document, unwrapped from tomlkit containers.

    Raises:
        VocabularyError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TOMLKitError as e:
        raise VocabularyError(f"{source}: invalid TOML: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document. Encoding is assumed to be UTF-8.

    Returns:
        The parsed TOML content.

    Raises:
        VocabularyError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise VocabularyError(f"{path}: cannot read file: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise VocabularyError(f"{path}: not valid UTF-8") from e
    return parse_toml_text(text, source=str(path))


def load_vocabulary(path: Path) -> OptionVocabulary:
    """Load an option vocabulary file.

    Args:
        path: Path to the vocabulary TOML file.

    Returns:
        The validated vocabulary.

    Raises:
        VocabularyError: If the file is unreadable or malformed.
    """
    logger.debug("Loading vocabulary from %s", path)
    vocabulary = OptionVocabulary.from_table(load_toml_dict(path), source=str(path))
    logger.info(
        "Loaded %d flag group(s) and %d key group(s) from %s",
        len(vocabulary.flags),
        len(vocabulary.keys),
        path,
    )
    return vocabulary


def render_vocabulary(vocabulary: OptionVocabulary) -> str:
    """Serialize ``vocabulary`` back to TOML text in the vocabulary file layout."""
    return tomlkit.dumps(vocabulary.to_dict())
