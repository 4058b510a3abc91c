# topmark:header:start
#
#   project      : Optsift
#   file         : __init__.py
#   file_relpath : src/optsift/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Optsift package.

Optsift is the option recognition core of a command-line toolkit. It sorts the
raw tokens of an invocation into flags, keys with values, unrecognized options
and positional arguments, dispatching registered callbacks on the way, and
ships a small CLI to inspect how a given argument vector is classified.
"""

from __future__ import annotations

from optsift.core import Options, Token, Tokenizer, tokenize

__all__ = [
    "Options",
    "Token",
    "Tokenizer",
    "tokenize",
]
