# topmark:header:start
#
#   project      : Optsift
#   file         : test_tokens.py
#   file_relpath : tests/core/test_tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `optsift.core.tokens`."""

from __future__ import annotations

import pytest

from optsift.core.tokens import Token, Tokenizer, tokenize


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("   ", []),
        ("tester", ["tester"]),
        ("tester -a  -b\tbanana\n", ["tester", "-a", "-b", "banana"]),
        ('tester "quoted value"', ["tester", '"quoted', 'value"']),
    ],
)
def test_tokenize_splits_on_whitespace_only(text: str, expected: list[str]) -> None:
    """Whitespace runs separate tokens; quotes have no special meaning."""
    assert tokenize(text) == expected


def test_from_string_drops_program_name() -> None:
    """The first word is the program name and is not indexed."""
    tokens = Tokenizer.from_string("tester -a argument")

    assert len(tokens) == 2
    assert tokens.token_at(0) == Token("-a", 0)
    assert tokens.token_at(1) == Token("argument", 1)


@pytest.mark.parametrize("text", ["", "tester", "   tester   "])
def test_from_string_without_arguments_is_empty(text: str) -> None:
    """Empty input and program-name-only input both yield zero tokens."""
    tokens = Tokenizer.from_string(text)

    assert len(tokens) == 0
    assert tokens.unclaimed_in_order() == []


def test_from_argv_keeps_elements_verbatim() -> None:
    """Already split vectors are not re-split, only the program name is removed."""
    tokens = Tokenizer.from_argv(["prog", "-o", "two words"])

    assert [t.value for t in tokens] == ["-o", "two words"]


def test_from_argv_empty_vector() -> None:
    """An empty vector yields zero tokens."""
    assert len(Tokenizer.from_argv([])) == 0


def test_token_at_out_of_range_returns_none() -> None:
    """Lookups outside the sequence signal "no token" instead of raising."""
    tokens = Tokenizer(["-a"])

    assert tokens.token_at(1) is None
    assert tokens.token_at(-1) is None


def test_claim_removes_token_from_positional_arguments() -> None:
    """Claimed tokens disappear from `unclaimed_in_order`; order is preserved."""
    tokens = Tokenizer(["a", "b", "c", "d"])

    tokens.claim(1)
    tokens.claim(3)

    assert tokens.unclaimed_in_order() == ["a", "c"]
    assert tokens.claimed_in_order() == ["b", "d"]
    assert tokens.is_claimed(1)
    assert not tokens.is_claimed(0)


def test_is_claimed_out_of_range_is_false() -> None:
    """Probing past the end reports unclaimed rather than raising."""
    assert not Tokenizer(["a"]).is_claimed(5)


def test_claim_out_of_range_raises() -> None:
    """Claiming a non-existent index is a caller bug."""
    with pytest.raises(IndexError):
        Tokenizer(["a"]).claim(1)


def test_looks_like_option() -> None:
    """Only tokens with a leading dash are option candidates."""
    assert Token("-a", 0).looks_like_option
    assert Token("--all", 0).looks_like_option
    assert Token("-", 0).looks_like_option
    assert not Token("a-b", 0).looks_like_option
