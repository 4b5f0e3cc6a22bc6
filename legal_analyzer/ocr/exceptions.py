class OcrError(Exception):
    """Raised when the OCR service cannot return text for a document."""
