# topmark:header:start
#
#   project      : Optsift
#   file         : __main__.py
#   file_relpath : src/optsift/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Optsift via ``python -m optsift``.

Delegates to `optsift.cli.main.cli`, the same entry point as the ``optsift``
console script.

Examples:
    Classify an argument vector::

        python -m optsift classify --flag=-a -- -a file.txt
"""

from __future__ import annotations

from optsift.cli.main import cli

if __name__ == "__main__":
    cli()
