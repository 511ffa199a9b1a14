"""
Format detection and extractor lookup.

A detector decides which MIME type an upload is treated as; the registry maps
that type to an extractor. Swapping the detector changes how strictly uploads
are classified without touching the upload handler.
"""
from typing import Dict, Optional

from studydoc.errors import UnsupportedFormat
from studydoc.extractors.base import BaseExtractor
from studydoc.extractors.plain_text import PlainTextExtractor
from studydoc.extractors.pymupdf_adapter import PyMuPdfExtractor
from studydoc.extractors.pypdf2_adapter import PyPdf2Extractor

PDF_TYPE = "application/pdf"
TEXT_TYPE = "text/plain"

PDF_ENGINES: Dict[str, type] = {
    "pypdf2": PyPdf2Extractor,
    "pymupdf": PyMuPdfExtractor,
}


class ExtractorRegistry:
    """Maps MIME types to extractors."""

    def __init__(self, extractors: Optional[Dict[str, BaseExtractor]] = None):
        self._extractors: Dict[str, BaseExtractor] = dict(extractors or {})

    def register(self, mimetype: str, extractor: BaseExtractor) -> None:
        self._extractors[mimetype.lower()] = extractor

    def for_type(self, mimetype: Optional[str]) -> BaseExtractor:
        extractor = self._extractors.get((mimetype or "").lower())
        if extractor is None:
            raise UnsupportedFormat()
        return extractor

    @property
    def types(self):
        return sorted(self._extractors)


class DeclaredTypeDetector:
    """Trusts the content type the client sent with the file."""

    name = "declared"

    def detect(self, declared_type: Optional[str], head: bytes) -> Optional[str]:
        return declared_type


class SniffingDetector:
    """Classifies by content, ignoring the declared type.

    PDFs are recognised by their ``%PDF-`` header. Anything else counts as text
    only if it decodes as UTF-8 and carries no NUL bytes.
    """

    name = "sniff"
    pdf_magic = b"%PDF-"

    def detect(self, declared_type: Optional[str], head: bytes) -> Optional[str]:
        if head.lstrip(b"\r\n\t ").startswith(self.pdf_magic):
            return PDF_TYPE
        if b"\x00" in head:
            return None
        try:
            head.decode("utf-8")
        except UnicodeDecodeError as exc:
            # a multi-byte sequence cut off at the end of the sample is still text
            if exc.reason != "unexpected end of data":
                return None
        return TEXT_TYPE


DETECTORS = {
    DeclaredTypeDetector.name: DeclaredTypeDetector,
    SniffingDetector.name: SniffingDetector,
}


def build_registry(pdf_engine: str = "pypdf2") -> ExtractorRegistry:
    """Registry for PDF and plain text with the requested PDF engine"""
    engine = (pdf_engine or "").lower()
    pdf_cls = PDF_ENGINES.get(engine)
    if pdf_cls is None:
        raise ValueError(f"Unknown PDF engine '{engine}'. Choose from: {list(PDF_ENGINES)}")
    return ExtractorRegistry({
        PDF_TYPE: pdf_cls(),
        TEXT_TYPE: PlainTextExtractor(),
    })


def build_detector(policy: str = "declared"):
    name = (policy or "").lower()
    detector_cls = DETECTORS.get(name)
    if detector_cls is None:
        raise ValueError(f"Unknown format policy '{name}'. Choose from: {list(DETECTORS)}")
    return detector_cls()
