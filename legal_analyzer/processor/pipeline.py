from abc import ABC, abstractmethod
from dataclasses import dataclass

from legal_analyzer.analysis.models import AnalysisResult
from legal_analyzer.extraction.models import ExtractedText
from legal_analyzer.processor.models import UploadedFile


@dataclass(slots=True)
class PipelineContext:
    upload: UploadedFile
    language: str
    extracted: ExtractedText | None = None
    analysis: AnalysisResult | None = None
    translated_analysis: AnalysisResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
