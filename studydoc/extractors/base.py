from abc import ABC, abstractmethod


class BaseExtractor(ABC):
    """Contract for all text extractors."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract plain text from raw file bytes.

        Args:
            data: Full content of the uploaded file.

        Returns:
            Extracted text.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """
