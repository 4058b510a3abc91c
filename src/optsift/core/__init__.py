# topmark:header:start
#
#   project      : Optsift
#   file         : __init__.py
#   file_relpath : src/optsift/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option recognition core: tokenizer, registry/classifier and reporting harness."""

from __future__ import annotations

from optsift.core.options import FlagCallback, KeyCallback, OptionKind, Options
from optsift.core.tokens import Token, Tokenizer, tokenize

__all__ = [
    "FlagCallback",
    "KeyCallback",
    "OptionKind",
    "Options",
    "Token",
    "Tokenizer",
    "tokenize",
]
