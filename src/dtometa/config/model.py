# topmark:header:start
#
#   project      : DtoMeta
#   file         : model.py
#   file_relpath : src/dtometa/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the resolution engine.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Immutability:
    - `Config` is ``frozen=True`` to prevent accidental mutation during a scan.
      Use `Config.thaw` → edit → `MutableConfig.freeze` for safe updates.

Layering (lowest → highest precedence):
    1) Built-in defaults
    2) Project configs discovered upward **root → current**; within a directory
       ``pyproject.toml`` (``[tool.dtometa]``) is merged first, then ``dtometa.toml``
    3) Extra config files passed explicitly (in the order provided)
    4) Argument overrides (CLI flags or API dicts)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from dtometa.config.io import (
    TomlTable,
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from dtometa.config.keys import ArgKey, Toml
from dtometa.config.logging import get_logger
from dtometa.constants import DTOMETA_TOML_NAME, PYPROJECT_TOML_NAME
from dtometa.core.diagnostics import Diagnostic, DiagnosticLog
from dtometa.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dtometa.config.logging import DtoMetaLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: DtoMetaLogger = get_logger(__name__)

DEFAULT_INTROSPECT_COMMENTS: Final[bool] = False
DEFAULT_CLASS_VALIDATOR_SHIM: Final[bool] = True
DEFAULT_DTO_KEY_OF_COMMENT: Final[str] = "description"
DEFAULT_MAX_LITERAL_DEPTH: Final[int] = 32


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for DtoMeta.

    Attributes:
        introspect_comments (bool): Enable the documentation enricher
            (``description`` and ``example``/``examples`` keys).
        class_validator_shim (bool): Enable the validation bound extractor
            (``minimum``, ``maximum``, ``minLength``, ``maxLength``).
        dto_key_of_comment (str): Metadata key under which the description is stored.
        max_literal_depth (int): Maximum nesting depth of inline object-literal schemas.
        config_files (tuple[Path | str, ...]): Paths or identifiers of the config sources used.
        diagnostics (tuple[Diagnostic, ...]): Warnings encountered while loading or merging.
    """

    introspect_comments: bool = DEFAULT_INTROSPECT_COMMENTS
    class_validator_shim: bool = DEFAULT_CLASS_VALIDATOR_SHIM
    dto_key_of_comment: str = DEFAULT_DTO_KEY_OF_COMMENT
    max_literal_depth: int = DEFAULT_MAX_LITERAL_DEPTH

    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def for_nested_members(self) -> Config:
        """Return the configuration used for members of inline object literals.

        Nested members are resolved with default options: both optional enrichers
        are disabled. Only the nesting limit is carried over.
        """
        return Config(
            introspect_comments=False,
            class_validator_shim=False,
            max_literal_depth=self.max_literal_depth,
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict."""
        return {
            Toml.SECTION_PLUGIN: {
                Toml.KEY_INTROSPECT_COMMENTS: self.introspect_comments,
                Toml.KEY_CLASS_VALIDATOR_SHIM: self.class_validator_shim,
                Toml.KEY_DTO_KEY_OF_COMMENT: self.dto_key_of_comment,
                Toml.KEY_MAX_LITERAL_DEPTH: self.max_literal_depth,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            introspect_comments=self.introspect_comments,
            class_validator_shim=self.class_validator_shim,
            dto_key_of_comment=self.dto_key_of_comment,
            max_literal_depth=self.max_literal_depth,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every option is tri-state: ``None`` means "inherit" and is resolved to the
    built-in default in `freeze`.

    Attributes:
        introspect_comments (bool | None): See `Config.introspect_comments`.
        class_validator_shim (bool | None): See `Config.class_validator_shim`.
        dto_key_of_comment (str | None): See `Config.dto_key_of_comment`.
        max_literal_depth (int | None): See `Config.max_literal_depth`.
        config_files (list[Path | str]): Config sources merged into this draft.
        diagnostics (DiagnosticLog): Warnings collected while loading and merging.
    """

    introspect_comments: bool | None = None
    class_validator_shim: bool | None = None
    dto_key_of_comment: str | None = None
    max_literal_depth: int | None = None

    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Raises:
            ConfigError: If ``max_literal_depth`` is lower than 1.
        """
        depth: int = (
            self.max_literal_depth
            if self.max_literal_depth is not None
            else DEFAULT_MAX_LITERAL_DEPTH
        )
        if depth < 1:
            raise ConfigError(f"max_literal_depth must be at least 1, got {depth}")

        return Config(
            introspect_comments=self.introspect_comments
            if self.introspect_comments is not None
            else DEFAULT_INTROSPECT_COMMENTS,
            class_validator_shim=self.class_validator_shim
            if self.class_validator_shim is not None
            else DEFAULT_CLASS_VALIDATOR_SHIM,
            dto_key_of_comment=self.dto_key_of_comment or DEFAULT_DTO_KEY_OF_COMMENT,
            max_literal_depth=depth,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the built-in runtime defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The parsed TOML data (already unnested from ``[tool.dtometa]``).
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableConfig: The resulting draft. Invalid values are reported as
                diagnostics and left unset.
        """
        draft: MutableConfig = cls()
        where: str = str(config_file) if config_file else "<defaults>"

        plugin_tbl: TomlTable = get_table_value(data, Toml.SECTION_PLUGIN)
        logger.trace("TOML [plugin]: %s", plugin_tbl)
        section: str = f"{where}:[{Toml.SECTION_PLUGIN}]"

        draft.introspect_comments = get_bool_value_or_none_checked(
            plugin_tbl,
            Toml.KEY_INTROSPECT_COMMENTS,
            where=section,
            diagnostics=draft.diagnostics,
        )
        draft.class_validator_shim = get_bool_value_or_none_checked(
            plugin_tbl,
            Toml.KEY_CLASS_VALIDATOR_SHIM,
            where=section,
            diagnostics=draft.diagnostics,
        )
        draft.dto_key_of_comment = get_string_value_or_none_checked(
            plugin_tbl,
            Toml.KEY_DTO_KEY_OF_COMMENT,
            where=section,
            diagnostics=draft.diagnostics,
        )
        draft.max_literal_depth = get_int_value_or_none_checked(
            plugin_tbl,
            Toml.KEY_MAX_LITERAL_DEPTH,
            where=section,
            diagnostics=draft.diagnostics,
        )

        for key in plugin_tbl:
            if key not in (
                Toml.KEY_INTROSPECT_COMMENTS,
                Toml.KEY_CLASS_VALIDATOR_SHIM,
                Toml.KEY_DTO_KEY_OF_COMMENT,
                Toml.KEY_MAX_LITERAL_DEPTH,
            ):
                draft.diagnostics.add_warning(f"Unknown key in {section}: {key!r}")

        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``dtometa.toml`` and ``pyproject.toml``; for the latter the
        ``[tool.dtometa]`` table is extracted.

        Returns:
            MutableConfig | None: The draft, or None when a ``pyproject.toml``
                carries no ``[tool.dtometa]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, Toml.SECTION_TOOL), Toml.SECTION_TOOL_NAME
            )
            if not tool_section:
                logger.debug("[tool.dtometa] section missing in %s", path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def discover_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        The result is ordered root-most → nearest; within a directory
        ``pyproject.toml`` precedes ``dtometa.toml``.
        """
        anchor: Path = start.resolve()
        if anchor.is_file():
            anchor = anchor.parent

        found: list[Path] = []
        for directory in (anchor, *anchor.parents):
            # Iterate nearest → root and prepend, so the final list is root → nearest
            for name in (DTOMETA_TOML_NAME, PYPROJECT_TOML_NAME):
                candidate: Path = directory / name
                if candidate.is_file():
                    found.insert(0, candidate)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            anchor (Path | None): Directory (or file) where upward discovery starts;
                defaults to the current working directory.
            extra_config_files (Iterable[Path] | None): Files merged **after** discovery.
            no_config (bool): If True, skip project discovery.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where explicitly-set values from ``other`` win."""
        merged = MutableConfig(
            introspect_comments=other.introspect_comments
            if other.introspect_comments is not None
            else self.introspect_comments,
            class_validator_shim=other.class_validator_shim
            if other.class_validator_shim is not None
            else self.class_validator_shim,
            dto_key_of_comment=other.dto_key_of_comment
            if other.dto_key_of_comment is not None
            else self.dto_key_of_comment,
            max_literal_depth=other.max_literal_depth
            if other.max_literal_depth is not None
            else self.max_literal_depth,
            config_files=self.config_files + other.config_files,
            diagnostics=DiagnosticLog.from_iterable([*self.diagnostics, *other.diagnostics]),
        )
        return merged

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Apply argument overrides (CLI namespace or API dict) in place.

        Keys whose value is ``None`` are ignored so unset CLI flags inherit.

        Returns:
            MutableConfig: This draft, for chaining.
        """
        overrides: dict[str, Any] = {
            ArgKey.INTROSPECT_COMMENTS: args.get(ArgKey.INTROSPECT_COMMENTS),
            ArgKey.CLASS_VALIDATOR_SHIM: args.get(ArgKey.CLASS_VALIDATOR_SHIM),
            ArgKey.DTO_KEY_OF_COMMENT: args.get(ArgKey.DTO_KEY_OF_COMMENT),
            ArgKey.MAX_LITERAL_DEPTH: args.get(ArgKey.MAX_LITERAL_DEPTH),
        }
        for name, value in overrides.items():
            if value is not None:
                setattr(self, name, value)
                logger.debug("Override %s=%r from arguments", name, value)
        return self
