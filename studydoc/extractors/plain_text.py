from studydoc.errors import ExtractionError
from studydoc.extractors.base import BaseExtractor


class PlainTextExtractor(BaseExtractor):
    """Decodes UTF-8 text files as-is."""

    encoding = "utf-8"

    def extract(self, data: bytes) -> str:
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"text is not valid {self.encoding}: {exc}") from exc
