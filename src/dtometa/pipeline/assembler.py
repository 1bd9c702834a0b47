# topmark:header:start
#
#   project      : DtoMeta
#   file         : assembler.py
#   file_relpath : src/dtometa/pipeline/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Metadata assembler: run the per-property pipeline and freeze its record.

The record of a property is seeded with its explicit annotations, then every
step of the pipeline offers its contributions in order; a key that is already
present is never overwritten. Members of inline object literals are assembled
the same way, one nesting level deeper, with the optional enrichers disabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dtometa.config.logging import get_logger
from dtometa.core.errors import LiteralNestingError
from dtometa.pipeline.context import ResolutionContext
from dtometa.pipeline.pipelines import PROPERTY_PIPELINE

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dtometa.config.logging import DtoMetaLogger
    from dtometa.config.model import Config
    from dtometa.metadata.record import PropertyMetadata
    from dtometa.model.nodes import PropertyDecl
    from dtometa.pipeline.context import ResolverServices
    from dtometa.pipeline.contracts import Step

logger: DtoMetaLogger = get_logger(__name__)


def run(ctx: ResolutionContext, steps: Sequence[Step] = PROPERTY_PIPELINE) -> ResolutionContext:
    """Execute the steps sequentially on ``ctx``.

    Args:
        ctx (ResolutionContext): Mutable resolution context.
        steps (Sequence[Step]): Ordered steps; each takes and returns the context.

    Returns:
        ResolutionContext: The same context after all steps ran.
    """
    for step in steps:
        ctx = step(ctx)
    return ctx


def assemble_property(
    prop: PropertyDecl,
    *,
    services: ResolverServices,
    config: Config,
    host_file: str = "",
    source: Any = None,
    depth: int = 0,
) -> PropertyMetadata:
    """Resolve one property into its frozen metadata record.

    Args:
        prop (PropertyDecl): The property declaration.
        services (ResolverServices): Oracle, normalizer and doc extractor.
        config (Config): Effective configuration.
        host_file (str): Identifier of the module hosting the class.
        source (Any): Source context for the documentation extractor.
        depth (int): Inline object-literal nesting depth.

    Returns:
        PropertyMetadata: The merged record.

    Raises:
        LiteralNestingError: If inline object literals nest deeper than
            ``config.max_literal_depth``.
    """
    ctx = ResolutionContext(
        prop=prop,
        config=config,
        services=services,
        host_file=host_file,
        source=source,
        depth=depth,
    )
    run(ctx)
    logger.trace("%r resolved through %s", prop.name, ", ".join(ctx.steps))
    return ctx.record.freeze()


def assemble_members(
    members: Sequence[PropertyDecl],
    parent: ResolutionContext,
) -> dict[str, PropertyMetadata]:
    """Assemble the members of an inline object literal.

    Hide markers and static flags do not apply to literal members; members
    without a simple name are skipped.

    Raises:
        LiteralNestingError: If the nesting limit is exceeded.
    """
    depth: int = parent.depth + 1
    limit: int = parent.config.max_literal_depth
    if depth > limit:
        raise LiteralNestingError(depth, limit)

    nested_config: Config = parent.config.for_nested_members()
    result: dict[str, PropertyMetadata] = {}
    for member in members:
        if not member.has_simple_name:
            logger.debug("Skipping literal member without a simple name: %r", member.name)
            continue
        assert member.name is not None
        result[member.name] = assemble_property(
            member,
            services=parent.services,
            config=nested_config,
            host_file=parent.host_file,
            source=None,
            depth=depth,
        )
    return result
