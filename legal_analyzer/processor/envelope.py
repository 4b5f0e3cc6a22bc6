from datetime import datetime, timezone

from legal_analyzer.analysis.serialization import AnalysisSerializer
from legal_analyzer.processor.pipeline import PipelineContext

PREVIEW_LENGTH = 500


class EnvelopeBuilder:
    """Assembles the JSON response body for a processed document."""

    def __init__(self, serializer: AnalysisSerializer | None = None) -> None:
        self._serializer = serializer or AnalysisSerializer()

    def build(
        self,
        context: PipelineContext,
        processed_at: datetime | None = None,
    ) -> dict[str, object]:
        analysis = context.translated_analysis or context.analysis
        if analysis is None or context.extracted is None:
            raise ValueError("PipelineContext must hold extracted text and an analysis")
        processed_at = processed_at or datetime.now(timezone.utc)
        upload = context.upload
        return {
            "success": True,
            "documentInfo": {
                "filename": upload.filename,
                "size": upload.size,
                "type": upload.mime_type,
                "language": context.language,
            },
            "extractedText": text_preview(context.extracted.text),
            "analysis": self._serializer.to_dict(analysis),
            "processedAt": processed_at.isoformat().replace("+00:00", "Z"),
        }


def text_preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """First ``length`` characters followed by an ellipsis."""
    return text[:length] + "..."
