from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all document text extraction adapters."""

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract plain text from document bytes.

        Args:
            content: Raw file content.

        Returns:
            Extracted text as a single string.

        Raises:
            DocumentExtractionError: if extraction fails for any reason.
        """
