# topmark:header:start
#
#   project      : DtoMeta
#   file         : record.py
#   file_relpath : src/dtometa/metadata/record.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Metadata records and their builders.

`MutablePropertyMetadata` is the builder the assembler writes into while one
property is resolved: explicit keys are seeded first and every later write is
first-write-wins. `freeze` turns it into an immutable `PropertyMetadata`.

`ClassMetadataBuilder` collects the records of one class scan and freezes into
an immutable `ClassMetadata`. A builder is owned by exactly one scan.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from dtometa.config.logging import DtoMetaLogger, get_logger
from dtometa.metadata.keys import MetaKey

logger: DtoMetaLogger = get_logger(__name__)


class PropertyMetadata(Mapping[str, Any]):
    """Immutable, ordered metadata record of one property."""

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, Any] | Iterable[tuple[str, Any]] = ()) -> None:
        self._items: Mapping[str, Any] = MappingProxyType(dict(items))

    def __getitem__(self, key: str) -> Any:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"PropertyMetadata({dict(self._items)!r})"


class MutablePropertyMetadata:
    """First-write-wins builder for a `PropertyMetadata` record.

    Args:
        explicit (Iterable[tuple[str, Any]]): Explicit annotations, seeded before
            any inferred value. When a key is repeated, its first occurrence wins.
    """

    def __init__(self, explicit: Iterable[tuple[str, Any]] = ()) -> None:
        self._items: dict[str, Any] = {}
        for key, value in explicit:
            self._items.setdefault(key, value)
        self._explicit: frozenset[str] = frozenset(self._items)

    def has(self, key: str) -> bool:
        """Whether ``key`` is already present (explicit or contributed)."""
        return key in self._items

    def is_explicit(self, key: str) -> bool:
        """Whether ``key`` was seeded from explicit annotations."""
        return key in self._explicit

    def offer(self, key: str, value: Any) -> bool:
        """Write ``key`` unless it is already present.

        Returns:
            bool: True if the value was written, False if an earlier value was kept.
        """
        if key in self._items:
            logger.trace("Keeping existing %r (offered %r)", key, value)
            return False
        self._items[key] = value
        return True

    def offer_all(self, contributions: Iterable[tuple[str, Any]]) -> None:
        """Offer each ``(key, value)`` pair in order."""
        for key, value in contributions:
            self.offer(key, value)

    def freeze(self) -> PropertyMetadata:
        """Return the immutable record.

        Raises:
            ValueError: If both ``example`` and ``examples`` are present.
        """
        if MetaKey.EXAMPLE in self._items and MetaKey.EXAMPLES in self._items:
            raise ValueError("'example' and 'examples' are mutually exclusive")
        return PropertyMetadata(self._items)


class ClassMetadata(Mapping[str, PropertyMetadata]):
    """Immutable map of property name to `PropertyMetadata`, in insertion order."""

    __slots__ = ("_records",)

    def __init__(
        self,
        records: Mapping[str, PropertyMetadata] | Iterable[tuple[str, PropertyMetadata]] = (),
    ) -> None:
        self._records: Mapping[str, PropertyMetadata] = MappingProxyType(dict(records))

    def __getitem__(self, key: str) -> PropertyMetadata:
        return self._records[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"ClassMetadata({dict(self._records)!r})"


class ClassMetadataBuilder:
    """Mutable builder of a `ClassMetadata` map, owned by a single scan."""

    def __init__(self) -> None:
        self._records: dict[str, PropertyMetadata] = {}
        self._frozen: bool = False

    def put(self, name: str, record: PropertyMetadata) -> None:
        """Insert ``record`` under ``name``, replacing any previous entry wholesale.

        Raises:
            RuntimeError: If the builder has already been frozen.
        """
        if self._frozen:
            raise RuntimeError("ClassMetadataBuilder is frozen")
        if name in self._records:
            logger.debug("Replacing existing metadata record for %r", name)
        self._records[name] = record

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def freeze(self) -> ClassMetadata:
        """Return the immutable map; the builder rejects writes afterwards."""
        self._frozen = True
        return ClassMetadata(self._records)
