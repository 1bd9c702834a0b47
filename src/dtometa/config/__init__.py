# topmark:header:start
#
#   project      : DtoMeta
#   file         : __init__.py
#   file_relpath : src/dtometa/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for DtoMeta.

The configuration layer is split into:

- `dtometa.config.keys`: canonical TOML section and key names;
- `dtometa.config.io`: TOML loading and typed value getters (``tomlkit``);
- `dtometa.config.model`: the immutable `Config` snapshot and its mutable
  `MutableConfig` builder (layered merge, freeze/thaw);
- `dtometa.config.logging`: logger class, TRACE level, and colored output.
"""

from __future__ import annotations
