# topmark:header:start
#
#   project      : DtoMeta
#   file         : required.py
#   file_relpath : src/dtometa/pipeline/steps/required.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Required step: derive ``required`` from the presence marker."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dtometa.config.logging import get_logger
from dtometa.metadata.keys import MetaKey
from dtometa.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from dtometa.config.logging import DtoMetaLogger
    from dtometa.pipeline.context import ResolutionContext

logger: DtoMetaLogger = get_logger(__name__)


class RequiredStep(BaseStep):
    """Contribute ``required = not optional``.

    The value depends only on the presence marker, never on other explicit keys.
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            keys_written=(MetaKey.REQUIRED,),
        )

    def may_proceed(self, ctx: ResolutionContext) -> bool:
        return not ctx.record.has(MetaKey.REQUIRED)

    def contribute(self, ctx: ResolutionContext) -> list[tuple[str, Any]]:
        return [(MetaKey.REQUIRED, not ctx.prop.optional)]
