from abc import ABC, abstractmethod


class BaseOcrClient(ABC):
    """Contract for remote OCR / document-processing services."""

    @abstractmethod
    def recognize(self, content: bytes, mime_type: str) -> str:
        """Return the text recognized in ``content``.

        Raises:
            OcrError: if the call fails or the service returns no text.
        """
