from legal_analyzer.config.settings import Settings
from legal_analyzer.ocr.client_base import BaseOcrClient
from legal_analyzer.ocr.document_ai_adapter import DocumentAiClientAdapter
from legal_analyzer.ocr.example_client_adapter import ExampleOcrClientAdapter


class OcrClientFactory:
    """Creates the OCR client named by ``settings.ocr_provider``."""

    PROVIDERS = ("document_ai", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrClient:
        provider = settings.ocr_provider.strip().lower()
        if provider == "example":
            return ExampleOcrClientAdapter()
        if provider == "document_ai":
            return DocumentAiClientAdapter(
                project_id=settings.google_cloud_project_id,
                location=settings.document_ai_location,
                processor_id=settings.document_ai_processor_id,
                timeout_seconds=settings.ocr_timeout_seconds,
            )
        raise ValueError(
            f"Unknown OCR provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
