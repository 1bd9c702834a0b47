# topmark:header:start
#
#   project      : DtoMeta
#   file         : provider.py
#   file_relpath : src/dtometa/provider.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attach class metadata to Python classes.

Schema generators look for a static ``_OPENAPI_METADATA_FACTORY`` callable on a
model class and call it to obtain the property metadata. `attach_metadata_factory`
installs it; `api_model` scans a class and attaches the result in one step::

    @api_model
    class Cat:
        name: NotRequired[str]
        age: int = 3

    get_metadata(Cat)["age"]  # {'required': True, 'type': Thunk(...), 'default': 3}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar, overload

from dtometa.api import scan_python_class
from dtometa.config.logging import get_logger
from dtometa.constants import METADATA_FACTORY_NAME

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from dtometa.config.logging import DtoMetaLogger
    from dtometa.config.model import Config
    from dtometa.metadata.record import ClassMetadata

logger: DtoMetaLogger = get_logger(__name__)

_T = TypeVar("_T", bound=type)


def attach_metadata_factory(cls: _T, metadata: ClassMetadata) -> _T:
    """Install a static provider returning ``metadata`` on ``cls``.

    The provider is set on ``cls`` itself, so subclasses scanned later install
    their own provider instead of sharing the base class's one.
    """

    def _factory() -> ClassMetadata:
        return metadata

    _factory.__qualname__ = f"{cls.__qualname__}.{METADATA_FACTORY_NAME}"
    setattr(cls, METADATA_FACTORY_NAME, staticmethod(_factory))
    logger.debug("Attached metadata provider to %s (%d properties)", cls.__qualname__, len(metadata))
    return cls


def get_metadata(cls: type) -> ClassMetadata | None:
    """Return the metadata attached to ``cls`` itself, or None."""
    factory: Any = vars(cls).get(METADATA_FACTORY_NAME)
    if factory is None:
        return None
    return getattr(cls, METADATA_FACTORY_NAME)()


@overload
def api_model(cls: _T, /) -> _T: ...


@overload
def api_model(*, config: Config | Mapping[str, Any] | None = None) -> Callable[[_T], _T]: ...


def api_model(
    cls: _T | None = None,
    /,
    *,
    config: Config | Mapping[str, Any] | None = None,
) -> _T | Callable[[_T], _T]:
    """Class decorator: scan the class and attach its metadata provider.

    Usable bare (``@api_model``) or with options (``@api_model(config={...})``).
    Classes whose annotations reference names defined later should be scanned
    explicitly with `dtometa.api.scan_python_class` once those names exist.
    """
    def _decorate(target: _T) -> _T:
        result = scan_python_class(target, config=config)
        return attach_metadata_factory(target, result.metadata)

    if cls is None:
        return _decorate
    return _decorate(cls)
