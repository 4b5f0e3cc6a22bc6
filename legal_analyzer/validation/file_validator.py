"""Upload checks run before any document processing."""

from legal_analyzer.validation.models import ValidationResult

MAX_FILE_SIZE_BYTES = 50 * 1024 * 1024

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME_TYPE = "application/msword"
IMAGE_MIME_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")
WORD_MIME_TYPES = frozenset({DOCX_MIME_TYPE, DOC_MIME_TYPE})
ALLOWED_MIME_TYPES = frozenset({PDF_MIME_TYPE, *WORD_MIME_TYPES, *IMAGE_MIME_TYPES})

BLOCKED_EXTENSIONS = (".exe", ".bat", ".cmd", ".scr", ".pif", ".vbs", ".js")


def validate_file(size: int, mime_type: str | None, filename: str | None) -> ValidationResult:
    """Check size, MIME type, filename and extension denylist in that order.

    The first failing rule determines the reported reason.
    """
    if size > MAX_FILE_SIZE_BYTES:
        return ValidationResult.invalid("File size exceeds 50MB limit")

    if mime_type not in ALLOWED_MIME_TYPES:
        return ValidationResult.invalid(
            f"Unsupported file type: {mime_type}. "
            "Supported types: PDF, DOCX, DOC, JPEG, PNG, GIF, WEBP"
        )

    if not filename or not filename.strip():
        return ValidationResult.invalid("Invalid filename")

    if filename.lower().endswith(BLOCKED_EXTENSIONS):
        return ValidationResult.invalid("File type not allowed for security reasons")

    return ValidationResult.ok()
