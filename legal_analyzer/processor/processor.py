from legal_analyzer.analysis.base import BaseAnalyzer
from legal_analyzer.analysis.factory import AnalyzerFactory
from legal_analyzer.config.settings import Settings
from legal_analyzer.extraction.extractor import TextExtractor
from legal_analyzer.extraction.word_adapter import WordTextExtractor
from legal_analyzer.logging.logger import Log
from legal_analyzer.ocr.factory import OcrClientFactory
from legal_analyzer.pdf.factory import PdfExtractorFactory
from legal_analyzer.processor.envelope import EnvelopeBuilder
from legal_analyzer.processor.models import UploadedFile
from legal_analyzer.processor.pipeline import PipelineContext, PipelineStep
from legal_analyzer.processor.steps import (
    AnalyzeStep,
    CheckReadableTextStep,
    ExtractTextStep,
    TranslateStep,
    ValidateLanguageStep,
    ValidateUploadStep,
)
from legal_analyzer.translation.translator import Translator


class Processor:
    """Orchestrates the document processing pipeline for one upload.

    Pipeline: validate -> extract -> check text -> analyze -> translate -> envelope.
    Fatal stages raise ProcessorError; degrading stages recover in place.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        envelope_builder: EnvelopeBuilder | None = None,
    ) -> None:
        self._steps = steps
        self._envelope_builder = envelope_builder or EnvelopeBuilder()

    def process(self, upload: UploadedFile, language: str) -> dict[str, object]:
        """Run every step in order and return the response envelope.

        Raises:
            ProcessorError: when a fatal stage fails.
        """
        Log.info(
            f"Processing {upload.filename} ({upload.size} bytes) in {language}",
            mime_type=upload.mime_type,
        )
        context = PipelineContext(upload=upload, language=language)
        for step in self._steps:
            context = step.run(context)
        return self._envelope_builder.build(context)


def build_steps(
    extractor: TextExtractor,
    analyzer: BaseAnalyzer,
    translator: Translator,
) -> list[PipelineStep]:
    return [
        ValidateUploadStep(),
        ValidateLanguageStep(),
        ExtractTextStep(extractor),
        CheckReadableTextStep(),
        AnalyzeStep(analyzer),
        TranslateStep(translator),
    ]


def build_processor(settings: Settings, translator: Translator) -> Processor:
    """Build a Processor with all adapters named in ``settings``."""
    extractor = TextExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        word_extractor=WordTextExtractor(),
        ocr_client=OcrClientFactory.create(settings),
    )
    analyzer = AnalyzerFactory.create(settings)
    return Processor(steps=build_steps(extractor, analyzer, translator))
