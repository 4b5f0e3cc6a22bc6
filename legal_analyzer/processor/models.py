from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedFile:
    """A multipart upload held in memory for the lifetime of one request."""

    content: bytes
    mime_type: str
    filename: str
    size: int
