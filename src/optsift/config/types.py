# topmark:header:start
#
#   project      : Optsift
#   file         : types.py
#   file_relpath : src/optsift/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared TOML-related type aliases for the config package."""

from __future__ import annotations

from typing import Any

TomlTable = dict[str, Any]
