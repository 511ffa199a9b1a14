from studydoc.extractors.base import BaseExtractor
from studydoc.extractors.plain_text import PlainTextExtractor
from studydoc.extractors.pymupdf_adapter import PyMuPdfExtractor
from studydoc.extractors.pypdf2_adapter import PyPdf2Extractor
from studydoc.extractors.registry import (
    PDF_TYPE,
    TEXT_TYPE,
    DeclaredTypeDetector,
    ExtractorRegistry,
    SniffingDetector,
    build_detector,
    build_registry,
)

__all__ = [
    "BaseExtractor",
    "PlainTextExtractor",
    "PyMuPdfExtractor",
    "PyPdf2Extractor",
    "ExtractorRegistry",
    "DeclaredTypeDetector",
    "SniffingDetector",
    "build_detector",
    "build_registry",
    "PDF_TYPE",
    "TEXT_TYPE",
]
