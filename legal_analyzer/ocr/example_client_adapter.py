"""Offline OCR adapter for local development and tests."""

from typing import ClassVar

from legal_analyzer.ocr.client_base import BaseOcrClient


class ExampleOcrClientAdapter(BaseOcrClient):
    """Returns fixed text for every document. No network calls."""

    DEFAULT_TEXT: ClassVar[str] = (
        "This Agreement is entered into between the Landlord and the Tenant. "
        "The Tenant agrees to pay rent on the first day of each month."
    )

    def recognize(self, content: bytes, mime_type: str) -> str:
        _ = content, mime_type
        return self.DEFAULT_TEXT
