from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for PDF text-layer readers."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Read the embedded text layer of a PDF.

        Scanned PDFs without a text layer yield an empty string rather than an
        error; the caller decides whether to fall back to OCR.

        Raises:
            PdfExtractionError: if the bytes cannot be parsed as a PDF.
        """
