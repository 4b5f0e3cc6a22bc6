"""Pipeline stages. Each step decides whether its failures are fatal or degrading."""

from legal_analyzer.analysis.base import BaseAnalyzer
from legal_analyzer.analysis.exceptions import AnalysisError
from legal_analyzer.extraction.exceptions import ExtractionError, NoTextFoundError
from legal_analyzer.extraction.extractor import TextExtractor
from legal_analyzer.extraction.text_checks import is_readable_text
from legal_analyzer.logging.logger import Log
from legal_analyzer.processor.exceptions import (
    DocumentAnalysisError,
    DocumentExtractionError,
    InvalidUploadError,
    NoReadableTextError,
)
from legal_analyzer.processor.pipeline import PipelineContext, PipelineStep
from legal_analyzer.translation.exceptions import TranslationError
from legal_analyzer.translation.translator import Translator
from legal_analyzer.validation.file_validator import validate_file
from legal_analyzer.validation.language_validator import validate_language

EXTRACTION_FAILED_MESSAGE = (
    "Failed to extract text from document. "
    "Please ensure the file is valid and readable."
)
NO_READABLE_TEXT_MESSAGE = (
    "No readable text found in the document. "
    "Please check if the file contains text."
)
ANALYSIS_FAILED_MESSAGE = "Failed to analyze document. Please try again."


class ValidateUploadStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        upload = context.upload
        result = validate_file(upload.size, upload.mime_type, upload.filename)
        if not result.is_valid:
            Log.warning("Upload rejected", filename=upload.filename, reason=result.error)
            raise InvalidUploadError(result.error or "Invalid file")
        return context


class ValidateLanguageStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        result = validate_language(context.language)
        if not result.is_valid:
            Log.warning("Language rejected", language=context.language, reason=result.error)
            raise InvalidUploadError(result.error or "Invalid language")
        context.language = result.value or context.language
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            context.extracted = self._extractor.extract(context.upload)
        except NoTextFoundError as exc:
            Log.warning("Document contains no text", filename=context.upload.filename)
            raise NoReadableTextError(NO_READABLE_TEXT_MESSAGE) from exc
        except ExtractionError as exc:
            Log.error(
                "Document extraction failed",
                filename=context.upload.filename,
                error=str(exc),
                cause=repr(exc.__cause__),
            )
            raise DocumentExtractionError(EXTRACTION_FAILED_MESSAGE) from exc
        Log.info(
            f"Extracted {len(context.extracted.text)} chars from {context.upload.filename}",
            source=context.extracted.source.value,
        )
        return context


class CheckReadableTextStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        text = context.extracted.text if context.extracted is not None else ""
        if not is_readable_text(text):
            Log.warning("Extracted text is not readable", filename=context.upload.filename)
            raise NoReadableTextError(NO_READABLE_TEXT_MESSAGE)
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is None:
            raise ValueError("PipelineContext.extracted must be set before analysis")
        try:
            context.analysis = self._analyzer.analyze(context.extracted.text, context.language)
        except AnalysisError as exc:
            Log.error("Document analysis failed", error=str(exc))
            raise DocumentAnalysisError(ANALYSIS_FAILED_MESSAGE) from exc
        return context


class TranslateStep(PipelineStep):
    def __init__(self, translator: Translator) -> None:
        self._translator = translator

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.analysis is None:
            raise ValueError("PipelineContext.analysis must be set before translation")
        try:
            context.translated_analysis = self._translator.translate_analysis(
                context.analysis, context.language
            )
        except TranslationError as exc:
            Log.error("Translation failed, continuing with untranslated analysis", error=str(exc))
            context.translated_analysis = context.analysis
        except Exception:
            Log.exception("Unexpected translation failure, continuing with untranslated analysis")
            context.translated_analysis = context.analysis
        return context
