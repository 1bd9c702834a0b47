# topmark:header:start
#
#   project      : DtoMeta
#   file         : __init__.py
#   file_relpath : src/dtometa/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public DtoMeta API (stable surface).

Thin wrappers around the resolution engine for Python classes:

- `scan_python_class` scans one class and returns its `ScanResult`;
- `scan_module` scans the classes defined in a module;
- `resolve_config` normalizes the ``config`` argument every function accepts.

Configuration contract
----------------------
Functions accept either a frozen `Config`, a plain mapping mirroring the TOML
shape (``{"plugin": {"introspect_comments": True}}``), or None for the built-in
defaults. Project files are *not* discovered here; the CLI does that.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from dtometa.config.logging import get_logger
from dtometa.config.model import Config, MutableConfig
from dtometa.introspect.builder import build_class_decl
from dtometa.introspect.oracle import PythonTypeOracle
from dtometa.pipeline.scanner import ScanResult, scan_class

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import ModuleType

    from dtometa.config.logging import DtoMetaLogger

logger: DtoMetaLogger = get_logger(__name__)

__all__ = [
    "ScanResult",
    "module_classes",
    "resolve_config",
    "scan_module",
    "scan_python_class",
]

_ORACLE = PythonTypeOracle()


def resolve_config(config: Config | Mapping[str, Any] | None) -> Config:
    """Return a frozen `Config` for ``config``.

    Raises:
        ConfigError: If the mapping holds an invalid ``max_literal_depth``.
    """
    if config is None:
        return Config()
    if isinstance(config, Config):
        return config
    draft: MutableConfig = MutableConfig.from_defaults().merge_with(
        MutableConfig.from_toml_dict(dict(config))
    )
    for diag in draft.diagnostics:
        logger.warning("Config: %s", diag.message)
    return draft.freeze()


def scan_python_class(
    cls: type,
    *,
    config: Config | Mapping[str, Any] | None = None,
) -> ScanResult:
    """Scan a Python class with the Python type oracle.

    Args:
        cls (type): The class to scan.
        config (Config | Mapping[str, Any] | None): Configuration (see module docs).

    Returns:
        ScanResult: Class name, frozen metadata and diagnostics.
    """
    return scan_class(build_class_decl(cls), oracle=_ORACLE, config=resolve_config(config))


def module_classes(module: ModuleType) -> list[type]:
    """Return the classes defined (not imported) in ``module``, in definition order."""
    return [
        obj
        for _, obj in vars(module).items()
        if inspect.isclass(obj) and obj.__module__ == module.__name__
    ]


def scan_module(
    module: ModuleType,
    *,
    class_names: Iterable[str] | None = None,
    config: Config | Mapping[str, Any] | None = None,
) -> list[ScanResult]:
    """Scan the classes of ``module``.

    Args:
        module (ModuleType): The imported module.
        class_names (Iterable[str] | None): Restrict the scan to these class names,
            in the given order.
        config (Config | Mapping[str, Any] | None): Configuration (see module docs).

    Returns:
        list[ScanResult]: One result per scanned class.

    Raises:
        LookupError: If a requested class name is not a class of ``module``.
    """
    frozen: Config = resolve_config(config)
    classes: list[type]
    if class_names is None:
        classes = module_classes(module)
    else:
        classes = []
        for name in class_names:
            obj: Any = getattr(module, name, None)
            if not inspect.isclass(obj):
                raise LookupError(f"{module.__name__} has no class {name!r}")
            classes.append(obj)
    return [scan_python_class(cls, config=frozen) for cls in classes]
