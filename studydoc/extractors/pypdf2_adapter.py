import io
from typing import List

import PyPDF2

from studydoc.errors import ExtractionError
from studydoc.extractors.base import BaseExtractor


class PyPdf2Extractor(BaseExtractor):
    """Extracts text from PDF using PyPDF2."""

    def extract(self, data: bytes) -> str:
        try:
            reader = PyPDF2.PdfReader(io.BytesIO(data))
            parts: List[str] = []
            for page in reader.pages:
                parts.append(page.extract_text() or "")
            return "\n".join(parts)
        except Exception as exc:
            raise ExtractionError(f"PyPDF2 extraction failed: {exc}") from exc
