# topmark:header:start
#
#   project      : DtoMeta
#   file         : validation.py
#   file_relpath : src/dtometa/pipeline/steps/validation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validation step: numeric and length bounds from validation annotations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dtometa.constants import VALIDATION_BOUNDS
from dtometa.metadata.keys import MetaKey
from dtometa.oracle.annotations import arguments, first_matching
from dtometa.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from dtometa.pipeline.context import ResolutionContext


class ValidationStep(BaseStep):
    """Map ``Min``/``Max``/``MinLength``/``MaxLength`` to schema bounds.

    The first argument of the first matching annotation is used. An annotation
    without arguments contributes nothing.
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            keys_written=(MetaKey.MINIMUM, MetaKey.MAXIMUM, MetaKey.MIN_LENGTH, MetaKey.MAX_LENGTH),
        )

    def may_proceed(self, ctx: ResolutionContext) -> bool:
        return ctx.config.class_validator_shim

    def contribute(self, ctx: ResolutionContext) -> list[tuple[str, Any]]:
        contributions: list[tuple[str, Any]] = []
        for annotation_name, key in VALIDATION_BOUNDS:
            annotation = first_matching((annotation_name,), ctx.prop.annotations)
            if annotation is None:
                continue
            args: tuple[Any, ...] = arguments(annotation)
            if args:
                contributions.append((key, args[0]))
        return contributions
