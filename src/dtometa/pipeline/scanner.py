# topmark:header:start
#
#   project      : DtoMeta
#   file         : scanner.py
#   file_relpath : src/dtometa/pipeline/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Class scanner: build the `ClassMetadata` of one class declaration.

Properties hidden with ``ApiHideProperty``, static members, and properties
without a simple identifier name are skipped. Each remaining property is
resolved in isolation: a failure drops that property (no partial record), is
logged, and is recorded as a diagnostic on the `ScanResult`; the scan goes on
with the next property.

A class without a name yields an empty result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dtometa.config.logging import get_logger
from dtometa.config.model import Config
from dtometa.constants import HIDE_PROPERTY_ANNOTATION
from dtometa.core.diagnostics import DiagnosticLog
from dtometa.metadata.record import ClassMetadata, ClassMetadataBuilder
from dtometa.oracle.annotations import first_matching
from dtometa.oracle.docs import extract_comment_and_examples
from dtometa.oracle.paths import normalize_import_path
from dtometa.pipeline.assembler import assemble_property
from dtometa.pipeline.context import ResolverServices

if TYPE_CHECKING:
    from dtometa.config.logging import DtoMetaLogger
    from dtometa.core.diagnostics import Diagnostic
    from dtometa.metadata.record import PropertyMetadata
    from dtometa.model.nodes import ClassDecl, PropertyDecl
    from dtometa.oracle.protocols import DocExtractor, ImportPathNormalizer, TypeOracle

logger: DtoMetaLogger = get_logger(__name__)


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning one class.

    Attributes:
        class_name (str | None): Name of the scanned class.
        metadata (ClassMetadata): Frozen property records.
        diagnostics (tuple[Diagnostic, ...]): Properties dropped because resolution failed.
    """

    class_name: str | None
    metadata: ClassMetadata = field(default_factory=ClassMetadata)
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def named(self) -> bool:
        """Whether the class had a name (unnamed classes produce no metadata)."""
        return bool(self.class_name)


def is_eligible(prop: PropertyDecl) -> bool:
    """Whether ``prop`` is described by class metadata."""
    if first_matching((HIDE_PROPERTY_ANNOTATION,), prop.annotations) is not None:
        return False
    if prop.is_static:
        return False
    return prop.has_simple_name


def scan_class(
    decl: ClassDecl,
    *,
    oracle: TypeOracle,
    config: Config | None = None,
    normalizer: ImportPathNormalizer = normalize_import_path,
    doc_extractor: DocExtractor = extract_comment_and_examples,
) -> ScanResult:
    """Scan ``decl`` and return its metadata.

    Args:
        decl (ClassDecl): The class declaration.
        oracle (TypeOracle): Type-system query surface.
        config (Config | None): Effective configuration; defaults when None.
        normalizer (ImportPathNormalizer): Reference name normalizer.
        doc_extractor (DocExtractor): Documentation extractor.

    Returns:
        ScanResult: Class name, frozen metadata, and diagnostics.
    """
    if not decl.name:
        logger.debug("Skipping unnamed class declaration")
        return ScanResult(class_name=None)

    effective: Config = config if config is not None else Config()
    services = ResolverServices(oracle=oracle, normalize=normalizer, extract_docs=doc_extractor)
    builder = ClassMetadataBuilder()
    diagnostics = DiagnosticLog()

    for prop in decl.properties:
        if not is_eligible(prop):
            logger.trace("%s: skipping property %r", decl.name, prop.name)
            continue
        assert prop.name is not None
        try:
            record: PropertyMetadata = assemble_property(
                prop,
                services=services,
                config=effective,
                host_file=decl.host_file,
                source=decl.source,
            )
        except Exception as e:
            logger.warning("%s.%s: property dropped: %s", decl.name, prop.name, e)
            diagnostics.add_warning(f"{decl.name}.{prop.name}: {type(e).__name__}: {e}")
            continue
        builder.put(prop.name, record)

    logger.debug("%s: %d propert(y/ies) described", decl.name, len(builder))
    return ScanResult(class_name=decl.name, metadata=builder.freeze(), diagnostics=tuple(diagnostics))
