# topmark:header:start
#
#   project      : DtoMeta
#   file         : __init__.py
#   file_relpath : src/dtometa/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DtoMeta CLI subcommands."""
