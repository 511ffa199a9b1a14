import fitz  # PyMuPDF

from studydoc.errors import ExtractionError
from studydoc.extractors.base import BaseExtractor


class PyMuPdfExtractor(BaseExtractor):
    """Extracts text from PDF using PyMuPDF. Native text only, no OCR."""

    def extract(self, data: bytes) -> str:
        try:
            with fitz.open(stream=data, filetype="pdf") as doc:
                pages = [page.get_text("text") for page in doc]
            return "\n".join(pages)
        except Exception as exc:
            raise ExtractionError(f"PyMuPDF extraction failed: {exc}") from exc
