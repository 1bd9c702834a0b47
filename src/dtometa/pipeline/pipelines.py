# topmark:header:start
#
#   project      : DtoMeta
#   file         : pipelines.py
#   file_relpath : src/dtometa/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standard resolution pipeline (ordered list of steps).

The order of the steps is the merge order of a property record: earlier steps
win over later ones for any key both contribute, and explicit annotations win
over all of them.
"""

from __future__ import annotations

from typing import Final

from dtometa.pipeline.contracts import Step
from dtometa.pipeline.steps.defaults import DefaultStep
from dtometa.pipeline.steps.docs import DocsStep
from dtometa.pipeline.steps.enum_resolver import EnumStep
from dtometa.pipeline.steps.required import RequiredStep
from dtometa.pipeline.steps.type_resolver import TypeStep
from dtometa.pipeline.steps.validation import ValidationStep

PROPERTY_PIPELINE: Final[tuple[Step, ...]] = (
    RequiredStep(),
    TypeStep(),
    DocsStep(),
    DefaultStep(),
    EnumStep(),
    ValidationStep(),
)
