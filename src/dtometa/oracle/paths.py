# topmark:header:start
#
#   project      : DtoMeta
#   file         : paths.py
#   file_relpath : src/dtometa/oracle/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default import-path normalizer for dotted Python references.

Canonical references produced by the Python oracle are fully qualified
(``package.module.Name``). Seen from a host module they are rewritten to the
shortest form that still resolves:

- same module: the bare (possibly nested) name (``Name``, ``Outer.Inner``);
- same top-level package: a relative form (``.sibling.Name``, ``..pkg.Name``),
  resolved against the host itself when the host is a package;
- otherwise: unchanged.

The module part of a reference is its longest prefix naming a loaded module.
Names without a module part (``String``, ``Number``) are returned unchanged and
array spellings (``[Item]``) are normalized element-wise.
"""

from __future__ import annotations

import sys


def split_reference(reference: str, host_file: str = "") -> tuple[str, str]:
    """Split a dotted reference into its module and qualified name.

    The longest prefix naming a loaded module is the module part. Without one,
    a reference under ``host_file`` is a name nested in the host module and
    anything else splits at the last dot.
    """
    parts: list[str] = reference.split(".")
    for end in range(len(parts) - 1, 0, -1):
        module: str = ".".join(parts[:end])
        if module in sys.modules:
            return module, ".".join(parts[end:])
    if host_file and reference.startswith(host_file + "."):
        return host_file, reference[len(host_file) + 1 :]
    module, _, name = reference.rpartition(".")
    return module, name


def _is_package(module: str) -> bool:
    return hasattr(sys.modules.get(module), "__path__")


def normalize_import_path(reference: str, host_file: str) -> str:
    """Return ``reference`` rewritten relative to the host module ``host_file``.

    Args:
        reference (str): Canonical reference name.
        host_file (str): Dotted name of the module that hosts the scanned class.

    Returns:
        str: The normalized reference name.
    """
    if len(reference) > 2 and reference.startswith("[") and reference.endswith("]"):
        return f"[{normalize_import_path(reference[1:-1], host_file)}]"

    module, qualname = split_reference(reference, host_file)
    if not module or not host_file or module == "builtins":
        return reference
    if module == host_file:
        return qualname

    # A package host resolves relative imports against itself.
    host_parts: list[str] = host_file.split(".")
    host_package: list[str] = host_parts if _is_package(host_file) else host_parts[:-1]
    target: list[str] = module.split(".")

    common: int = 0
    for host_part, target_part in zip(host_package, target):
        if host_part != target_part:
            break
        common += 1
    if common == 0:
        return reference

    dots: str = "." * (len(host_package) - common + 1)
    return dots + ".".join([*target[common:], qualname])
