class ExtractionError(Exception):
    """Base exception for text extraction failures."""


class UnsupportedDocumentTypeError(ExtractionError):
    """Raised when no extraction strategy exists for the MIME type."""


class WordExtractionError(ExtractionError):
    """Raised when a Word document cannot be opened."""


class NoTextFoundError(ExtractionError):
    """Raised when a document was read successfully but holds no text."""
