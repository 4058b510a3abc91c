# topmark:header:start
#
#   project      : Optsift
#   file         : __init__.py
#   file_relpath : src/optsift/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based inspection CLI for Optsift."""

from __future__ import annotations
