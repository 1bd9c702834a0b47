# topmark:header:start
#
#   project      : DtoMeta
#   file         : io.py
#   file_relpath : src/dtometa/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and typed value getters for DtoMeta configuration.

Parsing and rendering are done with `tomlkit`; parsed documents are unwrapped
to plain ``dict`` structures (`TomlTable`).

Two families of getters exist:
- *Unchecked* getters (`get_table_value`): return an empty default silently.
- *Checked* getters: validate the expected shape and record **warnings** in a
  `DiagnosticLog` (and also log a warning) without changing defaulting behavior.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from dtometa.config.keys import Toml
from dtometa.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from dtometa.config.logging import DtoMetaLogger
    from dtometa.core.diagnostics import DiagnosticLog

TomlTable: TypeAlias = dict[str, Any]

logger: DtoMetaLogger = get_logger(__name__)


# --- TOML file I/O ---


def load_defaults_dict() -> TomlTable:
    """Return DtoMeta's **runtime defaults** as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_PLUGIN: {
            Toml.KEY_INTROSPECT_COMMENTS: False,
            Toml.KEY_CLASS_VALIDATOR_SHIM: True,
            Toml.KEY_DTO_KEY_OF_COMMENT: "description",
            Toml.KEY_MAX_LITERAL_DEPTH: 32,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``dtometa.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings and lists."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, (list, tuple)):
        seq: list[object] = list(cast("list[object]", value))
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: Mapping[str, Any]) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (Mapping[str, Any]): TOML mapping to render. ``None`` values are omitted.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cleaned))


# --- Getters ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.
    """
    value: Any | None = table.get(key)
    return cast("TomlTable", value) if isinstance(value, dict) else {}


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected bool in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected bool in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional non-empty string value, warning when present but invalid."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str) and value:
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected non-empty string in %s, got %r", loc, value)
    diagnostics.add_warning(f"Expected non-empty string in {loc}, got {value!r}")
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    # Note: bool is a subclass of int; exclude it.
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
    return None
