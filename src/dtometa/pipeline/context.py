# topmark:header:start
#
#   project      : DtoMeta
#   file         : context.py
#   file_relpath : src/dtometa/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-property resolution context.

A `ResolutionContext` is created for every property (and every member of an
inline object literal) and carries everything the pipeline steps read: the
declaration, the frozen configuration, the injected collaborators, and the
record builder they write into. It is never shared between properties.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from dtometa.metadata.record import MutablePropertyMetadata
from dtometa.oracle.docs import extract_comment_and_examples
from dtometa.oracle.paths import normalize_import_path

if TYPE_CHECKING:
    from dtometa.config.model import Config
    from dtometa.model.nodes import PropertyDecl
    from dtometa.oracle.protocols import DocExtractor, ImportPathNormalizer, TypeOracle


@dataclass(frozen=True)
class ResolverServices:
    """The collaborators consulted while resolving properties.

    Attributes:
        oracle (TypeOracle): Type-system query surface.
        normalize (ImportPathNormalizer): Rewrites reference names for the host file.
        extract_docs (DocExtractor): Supplies descriptions and examples.
    """

    oracle: TypeOracle
    normalize: ImportPathNormalizer = normalize_import_path
    extract_docs: DocExtractor = extract_comment_and_examples


@dataclass
class ResolutionContext:
    """Mutable state of one property resolution.

    Attributes:
        prop (PropertyDecl): The property being resolved.
        config (Config): Effective configuration (narrowed for nested members).
        services (ResolverServices): Injected collaborators.
        host_file (str): Identifier of the module hosting the class.
        source (Any): Source context for documentation; None disables it.
        depth (int): Inline object-literal nesting depth (0 for class properties).
        record (MutablePropertyMetadata): First-write-wins record builder, seeded
            with the property's explicit annotations.
        steps (list[str]): Names of the steps that ran, in order.
    """

    prop: PropertyDecl
    config: Config
    services: ResolverServices
    host_file: str = ""
    source: Any = None
    depth: int = 0
    record: MutablePropertyMetadata = field(init=False)
    steps: list[str] = field(default_factory=lambda: [])

    def __post_init__(self) -> None:
        self.record = MutablePropertyMetadata(self.prop.explicit)

    @property
    def oracle(self) -> TypeOracle:
        """Shortcut for ``services.oracle``."""
        return self.services.oracle

    def normalize(self, reference: str) -> str:
        """Normalize a reference name for the host file."""
        return self.services.normalize(reference, self.host_file)
