"""PHP property extraction for accessor generation.

This package recognises class property declarations in PHP source, resolves
the property under a cursor or selection and recovers its declared type and
description from the preceding doc block. The resulting PropertyRecord
provides getter/setter names and descriptions for code generators.
"""

__version__ = "0.1.0"

from waivern_property_extractor.classifier import is_property_declaration
from waivern_property_extractor.config import PropertyExtractorConfig
from waivern_property_extractor.doc_block import (
    AnnotationLine,
    BlockClose,
    BlockOpen,
    DocBlockFindings,
    DocBlockScanner,
    DocLine,
    ScanState,
    TextLine as DocTextLine,
    scan_doc_block,
    tokenize_doc_line,
)
from waivern_property_extractor.document import (
    Position,
    Range,
    Selection,
    SourceDocument,
    TextDocument,
    TextLine,
)
from waivern_property_extractor.errors import (
    ExtractorConfigError,
    NoPropertyFoundError,
    PropertyExtractorError,
)
from waivern_property_extractor.extractor import PropertyExtractor
from waivern_property_extractor.models import (
    DEFAULT_PSEUDO_TYPES,
    PropertyRecord,
    resolve_type_hint,
)

__all__ = [
    # Version
    "__version__",
    # Extraction
    "PropertyExtractor",
    "PropertyRecord",
    "is_property_declaration",
    "resolve_type_hint",
    "DEFAULT_PSEUDO_TYPES",
    # Configuration
    "PropertyExtractorConfig",
    # Host document
    "Position",
    "Range",
    "Selection",
    "SourceDocument",
    "TextDocument",
    "TextLine",
    # Doc blocks
    "AnnotationLine",
    "BlockClose",
    "BlockOpen",
    "DocBlockFindings",
    "DocBlockScanner",
    "DocLine",
    "DocTextLine",
    "ScanState",
    "scan_doc_block",
    "tokenize_doc_line",
    # Errors
    "PropertyExtractorError",
    "NoPropertyFoundError",
    "ExtractorConfigError",
]
