# topmark:header:start
#
#   project      : Optsift
#   file         : constants.py
#   file_relpath : src/optsift/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Optsift Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

OPTSIFT_VERSION: str = get_version("optsift")
