# topmark:header:start
#
#   project      : DtoMeta
#   file         : contracts.py
#   file_relpath : src/dtometa/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for resolution steps (engine-facing).

Steps are instantiated objects that are *callable*; the assembler invokes them
as ``step(ctx)`` where ``ctx`` is a `ResolutionContext`.

Lifecycle
---------
1) ``step.may_proceed(ctx)`` gates execution (configuration flags).
2) If allowed, ``step.contribute(ctx)`` returns ``(key, value)`` pairs.
3) The contributions are offered to ``ctx.record``; keys already present are kept.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .context import ResolutionContext


class Step(Protocol):
    """Protocol for a single resolution step."""

    name: str
    keys_written: tuple[str, ...]

    def __call__(self, ctx: ResolutionContext) -> ResolutionContext:
        """Run the step lifecycle and return the same context."""
        ...

    def may_proceed(self, ctx: ResolutionContext) -> bool:
        """Return whether the step should run for this context."""
        ...

    def contribute(self, ctx: ResolutionContext) -> list[tuple[str, Any]]:
        """Return the step's ``(key, value)`` contributions, possibly none."""
        ...
