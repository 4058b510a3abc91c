# topmark:header:start
#
#   project      : Optsift
#   file         : __init__.py
#   file_relpath : src/optsift/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for Optsift.

Submodules:
    * `optsift.config.logging`: TRACE-aware logging setup.
    * `optsift.config.keys`: TOML section and key names of vocabulary files.
    * `optsift.config.vocabulary`: the `OptionVocabulary` model.
    * `optsift.config.loaders`: TOML loading with `tomlkit`.

Nothing is re-exported here; import from the submodules.
"""

from __future__ import annotations
