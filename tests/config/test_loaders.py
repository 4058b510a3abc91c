# topmark:header:start
#
#   project      : Optsift
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading and rendering of option vocabularies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import pytest

from optsift.config.loaders import (
    load_toml_dict,
    load_vocabulary,
    parse_toml_text,
    render_vocabulary,
)
from optsift.config.vocabulary import OptionVocabulary, VocabularyError

if TYPE_CHECKING:
    from pathlib import Path

VOCABULARY_TOML = """\
[flags]
awesome = ["-a", "--awesome"]
help = ["-h", "--help"]

[keys]
output = ["-o", "--output"]

[behavior]
exit_early = ["-h", "--help"]
"""


def test_parse_toml_text_returns_plain_dict() -> None:
    """Parsed documents are unwrapped to builtin types."""
    data = parse_toml_text(VOCABULARY_TOML)

    assert type(data) is dict
    assert data["flags"]["awesome"] == ["-a", "--awesome"]
    assert type(data["flags"]["awesome"]) is list


def test_parse_toml_text_invalid_raises() -> None:
    """Syntax errors surface as `VocabularyError` naming the source."""
    with pytest.raises(VocabularyError, match=r"^broken\.toml: invalid TOML"):
        parse_toml_text("[flags\nx = ", source="broken.toml")


def test_load_vocabulary_from_file(write_vocabulary: Callable[[str], Path]) -> None:
    """A well-formed file yields its groups in declaration order."""
    path = write_vocabulary(VOCABULARY_TOML)

    vocabulary = load_vocabulary(path)

    assert [g.label for g in vocabulary.flags] == ["awesome", "help"]
    assert [g.names for g in vocabulary.keys] == [("-o", "--output")]
    assert vocabulary.exit_early == {"-h", "--help"}


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    """Unreadable files raise `VocabularyError`."""
    with pytest.raises(VocabularyError, match="cannot read file"):
        load_toml_dict(tmp_path / "absent.toml")


def test_load_toml_dict_rejects_non_utf8(tmp_path: Path) -> None:
    """Files are decoded as UTF-8."""
    path = tmp_path / "latin1.toml"
    path.write_bytes(b"[flags]\nna\xefve = ['-n']\n")

    with pytest.raises(VocabularyError, match="not valid UTF-8"):
        load_toml_dict(path)


def test_load_vocabulary_rejects_bad_names(write_vocabulary: Callable[[str], Path]) -> None:
    """Semantic errors in a well-formed file are reported too."""
    path = write_vocabulary('[keys]\noutput = ["output"]\n')

    with pytest.raises(VocabularyError, match=r"keys\.output: invalid option name 'output'"):
        load_vocabulary(path)


def test_render_vocabulary_parses_back() -> None:
    """Rendered TOML describes the same vocabulary."""
    vocabulary = OptionVocabulary.from_table(parse_toml_text(VOCABULARY_TOML))

    text = render_vocabulary(vocabulary)

    assert "[flags]" in text
    assert OptionVocabulary.from_table(parse_toml_text(text)) == vocabulary
