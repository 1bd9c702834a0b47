# topmark:header:start
#
#   project      : DtoMeta
#   file         : enum_resolver.py
#   file_relpath : src/dtometa/pipeline/steps/enum_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum step: resolve the ``enum`` and ``isArray`` keys of a property.

The step works on the resolved type of the whole property declaration, which
for optional properties is a union synthesized around the declared type:

1. an explicit ``enum`` suppresses the step;
2. an auto-generated union is replaced by its *last* constituent;
3. an array wrapper is unwrapped (``isArray``); an array whose element type
   cannot be determined stops the step;
4. a type that is not an enum, or that is a single enum member, gets a second
   chance: a non-member is checked for being a synthesized union of enum
   members, and the resulting type is unwrapped from an array again;
5. the enum's name is normalized for the host module and emitted as a
   `Reference`, together with ``isArray`` when an array was unwrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dtometa.config.logging import get_logger
from dtometa.metadata.keys import MetaKey
from dtometa.metadata.types import Reference
from dtometa.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dtometa.config.logging import DtoMetaLogger
    from dtometa.oracle.protocols import TypeHandle
    from dtometa.pipeline.context import ResolutionContext

logger: DtoMetaLogger = get_logger(__name__)


class EnumStep(BaseStep):
    """Identify enum-typed properties, including arrays of enums."""

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            keys_written=(MetaKey.ENUM, MetaKey.IS_ARRAY),
        )

    def may_proceed(self, ctx: ResolutionContext) -> bool:
        return not ctx.record.has(MetaKey.ENUM)

    def contribute(self, ctx: ResolutionContext) -> list[tuple[str, Any]]:
        oracle = ctx.oracle
        handle: TypeHandle | None = oracle.resolve_type(ctx.prop)
        if handle is None:
            return []

        if oracle.is_auto_generated_type_union(handle):
            constituents: Sequence[TypeHandle] = oracle.union_constituents(handle)
            if not constituents:
                return []
            handle = constituents[-1]

        unwrapped: tuple[TypeHandle, bool] | None = oracle.unwrap_array(handle)
        if unwrapped is None:
            return []
        handle, is_array = unwrapped

        is_member: bool = oracle.is_enum_member(handle)
        if not oracle.is_enum_type(handle) or is_member:
            if not is_member:
                handle = oracle.enum_of_member_union(handle)
                if handle is None:
                    return []
            unwrapped = oracle.unwrap_array(handle)
            if unwrapped is None:
                return []
            handle, is_array = unwrapped

        name: str = ctx.normalize(oracle.type_name(handle))
        logger.debug("%r: enum %s (array=%s)", ctx.prop.name, name, is_array)
        contributions: list[tuple[str, Any]] = [(MetaKey.ENUM, Reference(name))]
        if is_array:
            contributions.append((MetaKey.IS_ARRAY, True))
        return contributions
