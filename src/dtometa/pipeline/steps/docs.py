# topmark:header:start
#
#   project      : DtoMeta
#   file         : docs.py
#   file_relpath : src/dtometa/pipeline/steps/docs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Documentation step: description and examples from property comments."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dtometa.config.logging import get_logger
from dtometa.metadata.keys import MetaKey
from dtometa.metadata.types import to_literal
from dtometa.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dtometa.config.logging import DtoMetaLogger
    from dtometa.pipeline.context import ResolutionContext

logger: DtoMetaLogger = get_logger(__name__)


class DocsStep(BaseStep):
    """Contribute the description and ``example``/``examples``.

    Runs only when comment introspection is enabled and the class carries a
    source context. The description is stored under the configured
    ``dto_key_of_comment`` key. One example yields ``example``; two or more
    yield ``examples``; none yields neither.
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            keys_written=(MetaKey.DESCRIPTION, MetaKey.EXAMPLE, MetaKey.EXAMPLES),
        )

    def may_proceed(self, ctx: ResolutionContext) -> bool:
        return ctx.config.introspect_comments and ctx.source is not None

    def contribute(self, ctx: ResolutionContext) -> list[tuple[str, Any]]:
        description: str
        examples: Sequence[Any]
        description, examples = ctx.services.extract_docs(ctx.prop, ctx.source, ctx.oracle)

        contributions: list[tuple[str, Any]] = []
        if description:
            contributions.append((ctx.config.dto_key_of_comment, description))

        if ctx.record.has(MetaKey.EXAMPLE) or ctx.record.has(MetaKey.EXAMPLES):
            return contributions
        if len(examples) == 1:
            contributions.append((MetaKey.EXAMPLE, to_literal(examples[0])))
        elif len(examples) > 1:
            contributions.append((MetaKey.EXAMPLES, to_literal(list(examples))))
        return contributions
