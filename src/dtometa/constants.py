# topmark:header:start
#
#   project      : DtoMeta
#   file         : constants.py
#   file_relpath : src/dtometa/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DtoMeta Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    DTOMETA_VERSION: str = get_version("dtometa")
except PackageNotFoundError:  # running from a source checkout
    DTOMETA_VERSION = "0.0.0"

# Name of the static provider attached to scanned classes.
METADATA_FACTORY_NAME: Final[str] = "_OPENAPI_METADATA_FACTORY"

# Annotation that hides a property from metadata synthesis.
HIDE_PROPERTY_ANNOTATION: Final[str] = "ApiHideProperty"

# Validation annotation name -> metadata key, in evaluation order.
VALIDATION_BOUNDS: Final[tuple[tuple[str, str], ...]] = (
    ("Min", "minimum"),
    ("Max", "maximum"),
    ("MinLength", "minLength"),
    ("MaxLength", "maxLength"),
)

# Project configuration files.
DTOMETA_TOML_NAME: Final[str] = "dtometa.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

VALUE_NOT_SET: Final[str] = "<not set>"
