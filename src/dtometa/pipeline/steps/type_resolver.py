# topmark:header:start
#
#   project      : DtoMeta
#   file         : type_resolver.py
#   file_relpath : src/dtometa/pipeline/steps/type_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type step: resolve the ``type`` (and ``nullable``) keys of a property.

Branches are tried in order, and the first matching one decides:

1. an explicit ``type`` suppresses the step entirely;
2. an inline object literal becomes a nested `ObjectLiteral`, each member
   resolved through the same per-property pipeline;
3. a union is reduced by dropping its ``null`` variant. A single remaining
   member is resolved recursively and ``nullable`` is added when a ``null``
   variant was present. Two or more remaining members yield nothing;
4. any other expression is resolved through the type oracle to a canonical
   reference name, normalized for the host module, and emitted as a lazily
   evaluated `Reference` (or `ArrayOf` for ``[Item]`` names).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dtometa.config.logging import get_logger
from dtometa.metadata.keys import MetaKey
from dtometa.metadata.types import ObjectLiteral, Thunk, reference_from_name
from dtometa.model.nodes import NullType, ObjectLiteralType, UnionType
from dtometa.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from dtometa.config.logging import DtoMetaLogger
    from dtometa.model.nodes import TypeNode
    from dtometa.pipeline.context import ResolutionContext

logger: DtoMetaLogger = get_logger(__name__)


class TypeStep(BaseStep):
    """Resolve the declared type expression of a property."""

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            keys_written=(MetaKey.TYPE, MetaKey.NULLABLE),
        )

    def may_proceed(self, ctx: ResolutionContext) -> bool:
        return not ctx.record.has(MetaKey.TYPE)

    def contribute(self, ctx: ResolutionContext) -> list[tuple[str, Any]]:
        return self.resolve_node(ctx, ctx.prop.type)

    def resolve_node(self, ctx: ResolutionContext, node: TypeNode | None) -> list[tuple[str, Any]]:
        """Return the contributions for one type expression."""
        if isinstance(node, ObjectLiteralType):
            # Imported here: the assembler imports the pipeline, which imports this step.
            from dtometa.pipeline.assembler import assemble_members

            members = assemble_members(node.members, ctx)
            return [(MetaKey.TYPE, Thunk.of(ObjectLiteral(members)))]

        if isinstance(node, UnionType):
            null_variant: TypeNode | None = next(
                (item for item in node.types if isinstance(item, NullType)), None
            )
            remaining: list[TypeNode] = [item for item in node.types if item is not null_variant]
            if len(remaining) != 1:
                logger.debug(
                    "%r: union with %d non-null members left without a type",
                    ctx.prop.name,
                    len(remaining),
                )
                return []
            contributions: list[tuple[str, Any]] = self.resolve_node(ctx, remaining[0])
            if null_variant is not None:
                contributions.append((MetaKey.NULLABLE, True))
            return contributions

        handle = ctx.oracle.resolve_type(node)
        if handle is None:
            return []
        reference: str | None = ctx.oracle.canonical_reference(handle)
        if not reference:
            return []
        name: str = ctx.normalize(reference)
        return [(MetaKey.TYPE, Thunk(lambda: reference_from_name(name)))]
