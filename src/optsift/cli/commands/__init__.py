# topmark:header:start
#
#   project      : Optsift
#   file         : __init__.py
#   file_relpath : src/optsift/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Optsift CLI subcommands."""

from __future__ import annotations
