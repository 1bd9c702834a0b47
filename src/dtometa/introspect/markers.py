# topmark:header:start
#
#   project      : DtoMeta
#   file         : markers.py
#   file_relpath : src/dtometa/introspect/markers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property markers for Python classes.

Markers are placed in ``typing.Annotated`` metadata::

    class Cat:
        name: Annotated[str, MinLength(1), ApiProperty(description="Display name")]
        secret: Annotated[str, ApiHideProperty()]

`ApiProperty` carries explicit metadata keys, which always win over inferred
values. The other markers become `Annotation` entries read by the resolution
steps (``ApiHideProperty`` by the scanner, the bounds by the validation step).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, ClassVar

from dtometa.constants import HIDE_PROPERTY_ANNOTATION
from dtometa.model.nodes import Annotation


class Marker:
    """Base class of annotation markers."""

    marker_name: ClassVar[str] = ""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.args: tuple[Any, ...] = args
        self.kwargs: dict[str, Any] = dict(kwargs)

    def annotation(self) -> Annotation:
        """Return the engine-facing annotation for this marker."""
        return Annotation(
            name=self.marker_name or self.__class__.__name__,
            arguments=self.args,
            keywords=MappingProxyType(dict(self.kwargs)),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Marker):
            return NotImplemented
        return (type(self), self.args, self.kwargs) == (type(other), other.args, other.kwargs)

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        parts: list[str] = [repr(a) for a in self.args]
        parts.extend(f"{k}={v!r}" for k, v in self.kwargs.items())
        return f"{self.__class__.__name__}({', '.join(parts)})"


class ApiProperty(Marker):
    """Explicit metadata keys for a property (``ApiProperty(type=..., example=...)``).

    Keys are stored verbatim and in the given order.
    """

    def __init__(self, **explicit: Any) -> None:
        super().__init__(**explicit)

    @property
    def explicit(self) -> tuple[tuple[str, Any], ...]:
        """The explicit ``(key, value)`` pairs."""
        return tuple(self.kwargs.items())


class ApiHideProperty(Marker):
    """Exclude the property from the class metadata."""

    marker_name = HIDE_PROPERTY_ANNOTATION

    def __init__(self) -> None:
        super().__init__()


class Min(Marker):
    """Lower numeric bound (``minimum``)."""

    def __init__(self, value: float) -> None:
        super().__init__(value)


class Max(Marker):
    """Upper numeric bound (``maximum``)."""

    def __init__(self, value: float) -> None:
        super().__init__(value)


class MinLength(Marker):
    """Minimum length (``minLength``)."""

    def __init__(self, value: int) -> None:
        super().__init__(value)


class MaxLength(Marker):
    """Maximum length (``maxLength``)."""

    def __init__(self, value: int) -> None:
        super().__init__(value)
