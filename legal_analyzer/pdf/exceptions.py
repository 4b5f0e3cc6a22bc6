class PdfExtractionError(Exception):
    """Raised when the PDF text layer cannot be read."""


class PdfPasswordProtectedError(PdfExtractionError):
    """Raised when the PDF requires a password to open."""
