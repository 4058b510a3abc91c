# topmark:header:start
#
#   project      : Optsift
#   file         : test_report.py
#   file_relpath : tests/core/test_report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the recording harness in `optsift.core.report`."""

from __future__ import annotations

import json

from optsift.config.vocabulary import OptionVocabulary
from optsift.core.report import KeyValue, classify
from optsift.core.tokens import Tokenizer


def _vocabulary() -> OptionVocabulary:
    return OptionVocabulary.from_groups(
        flags=[["-a", "--awesome"], ["-b"], ["-h", "--help"]],
        keys=[["-o", "--output"]],
        exit_early=["-h", "--help"],
    )


def test_report_partitions_tokens() -> None:
    """Every token ends up in exactly one category."""
    report = classify(
        _vocabulary(),
        Tokenizer.from_string("tester -ab src --output out.txt -x dest"),
    )

    assert report.flags == ("-a", "-b")
    assert report.keys == (KeyValue("--output", "out.txt"),)
    assert report.unrecognized_options == ("-x",)
    assert report.keys_not_given_value == ()
    assert report.positional_arguments == ("src", "dest")
    assert not report.exit_early
    assert report.misused


def test_report_exit_early_without_misuse() -> None:
    """Exit-early alone is not misuse."""
    report = classify(_vocabulary(), Tokenizer(["--help", "topic"]))

    assert report.exit_early
    assert not report.misused
    assert report.positional_arguments == ("topic",)
    assert [d.level.value for d in report.diagnostics] == ["info"]


def test_report_key_without_value() -> None:
    """A trailing key shows up as missing its value, not as a key/value pair."""
    report = classify(_vocabulary(), Tokenizer(["-a", "-o"]))

    assert report.keys == ()
    assert report.keys_not_given_value == ("-o",)
    assert report.misused


def test_report_to_dict_is_json_serializable() -> None:
    """`to_dict` only contains JSON types."""
    report = classify(_vocabulary(), Tokenizer(["-a", "-o", "x", "-z", "pos"]))

    payload = json.loads(json.dumps(report.to_dict()))

    assert payload["flags"] == ["-a"]
    assert payload["keys"] == [{"key": "-o", "value": "x"}]
    assert payload["unrecognized_options"] == ["-z"]
    assert payload["positional_arguments"] == ["pos"]
    assert payload["misused"] is True
    assert payload["diagnostics"] == [
        {"level": "error", "message": "Unrecognized option: -z", "option": "-z"}
    ]


def test_empty_vocabulary_marks_every_option_unrecognized() -> None:
    """Without registrations, every dash token is misuse."""
    report = classify(OptionVocabulary(), Tokenizer(["-a", "file", "--b"]))

    assert report.unrecognized_options == ("-a", "--b")
    assert report.positional_arguments == ("file",)
