# topmark:header:start
#
#   project      : DtoMeta
#   file         : defaults.py
#   file_relpath : src/dtometa/pipeline/steps/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default step: ``default`` from the property initializer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dtometa.metadata.keys import MetaKey
from dtometa.model.nodes import TypeAssertion
from dtometa.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from dtometa.pipeline.context import ResolutionContext


class DefaultStep(BaseStep):
    """Contribute the initializer value, unwrapping one type assertion."""

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            keys_written=(MetaKey.DEFAULT,),
        )

    def may_proceed(self, ctx: ResolutionContext) -> bool:
        return ctx.prop.initializer is not None and not ctx.record.has(MetaKey.DEFAULT)

    def contribute(self, ctx: ResolutionContext) -> list[tuple[str, Any]]:
        initializer = ctx.prop.initializer
        if isinstance(initializer, TypeAssertion):
            initializer = initializer.expression
        if initializer is None or isinstance(initializer, TypeAssertion):
            # Only one level is unwrapped; a nested assertion carries no plain value.
            return []
        return [(MetaKey.DEFAULT, initializer.value)]
