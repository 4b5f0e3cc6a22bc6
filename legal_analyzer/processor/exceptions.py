class ProcessorError(Exception):
    """Base exception for pipeline failures that end the request.

    ``message`` is safe to show to clients; ``status_code`` is the HTTP status
    the API layer responds with.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidUploadError(ProcessorError):
    """Raised when the upload or the requested language fails validation."""

    status_code = 400


class NoReadableTextError(ProcessorError):
    """Raised when the document yields no usable text."""

    status_code = 400


class DocumentExtractionError(ProcessorError):
    """Raised when text extraction fails."""

    status_code = 500


class DocumentAnalysisError(ProcessorError):
    """Raised when analysis fails outright."""

    status_code = 500
