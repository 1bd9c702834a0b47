# topmark:header:start
#
#   project      : DtoMeta
#   file         : __main__.py
#   file_relpath : src/dtometa/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DtoMeta via ``python -m dtometa``.

It delegates directly to :func:`dtometa.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how DtoMeta is launched.

Examples:
    Scan the classes of an importable module::

        python -m dtometa scan myapp.dto
"""

from __future__ import annotations

from dtometa.cli.main import cli

if __name__ == "__main__":
    cli()
