"""
Extraction Package

Document text extraction (PDF, DOCX, TXT) and the one-call worksheet
importer built on top of the parser.
"""

from .extractor import (
    FORMAT_GUIDE,
    SUPPORTED_EXTENSIONS,
    DocumentDecodeError,
    EmptyDocumentError,
    ExtractionError,
    UnsupportedFormatError,
    extract_text,
)
from .importer import ImportResult, import_worksheet

__all__ = [
    "FORMAT_GUIDE",
    "SUPPORTED_EXTENSIONS",
    "ExtractionError",
    "UnsupportedFormatError",
    "EmptyDocumentError",
    "DocumentDecodeError",
    "extract_text",
    "ImportResult",
    "import_worksheet",
]
