# topmark:header:start
#
#   project      : DtoMeta
#   file         : base.py
#   file_relpath : src/dtometa/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based resolution steps.

The assembler invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → contribute? → offer to record
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dtometa.config.logging import get_logger

if TYPE_CHECKING:
    from dtometa.config.logging import DtoMetaLogger
    from dtometa.pipeline.context import ResolutionContext

logger: DtoMetaLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for resolution steps.

    Subclass this to implement a concrete step by overriding ``contribute()`` and
    optionally ``may_proceed()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable step identifier for logs/tracing.
        keys_written (tuple[str, ...]): Metadata keys this step usually contributes
            (informational; used in traces and step listings).
    """

    name: str
    keys_written: tuple[str, ...] = ()

    def __call__(self, ctx: ResolutionContext) -> ResolutionContext:
        """Invoke the step lifecycle: gate → contribute (if allowed) → offer.

        Args:
            ctx (ResolutionContext): The context of the property being resolved.

        Returns:
            ResolutionContext: The same context instance after mutation.
        """
        if not self.may_proceed(ctx):
            logger.trace("%s: skipped for %r", self.name, ctx.prop.name)
            return ctx

        ctx.steps.append(self.name)
        contributions: list[tuple[str, Any]] = self.contribute(ctx)
        ctx.record.offer_all(contributions)
        logger.trace("%s: %r contributed %s", self.name, ctx.prop.name, contributions)
        return ctx

    def may_proceed(self, ctx: ResolutionContext) -> bool:
        """Return whether the step should run. Default: always."""
        return True

    def contribute(self, ctx: ResolutionContext) -> list[tuple[str, Any]]:
        """Return the step's contributions. Subclasses must implement this."""
        raise NotImplementedError
