"""MIME-dispatched text extraction with OCR fallback for PDFs."""

from legal_analyzer.extraction.exceptions import (
    ExtractionError,
    NoTextFoundError,
    UnsupportedDocumentTypeError,
)
from legal_analyzer.extraction.models import ExtractedText, ExtractionSource
from legal_analyzer.extraction.word_adapter import WordTextExtractor
from legal_analyzer.logging.logger import Log
from legal_analyzer.ocr.client_base import BaseOcrClient
from legal_analyzer.ocr.exceptions import OcrError
from legal_analyzer.pdf.base import BasePdfExtractor
from legal_analyzer.pdf.exceptions import PdfExtractionError
from legal_analyzer.processor.models import UploadedFile
from legal_analyzer.validation.file_validator import (
    IMAGE_MIME_TYPES,
    PDF_MIME_TYPE,
    WORD_MIME_TYPES,
)


class TextExtractor:
    """Chooses an extraction strategy from the declared MIME type.

    PDF: text layer first, OCR when the layer is empty.
    Word: python-docx only; an empty document is reported, never OCR'd.
    Image: OCR only.
    """

    def __init__(
        self,
        *,
        pdf_extractor: BasePdfExtractor,
        word_extractor: WordTextExtractor,
        ocr_client: BaseOcrClient,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._word_extractor = word_extractor
        self._ocr_client = ocr_client

    def extract(self, file: UploadedFile) -> ExtractedText:
        """Extract text from an already validated upload.

        Raises:
            ExtractionError: on any failure; ``NoTextFoundError`` when the
                document opened fine but contains no text.
        """
        if file.mime_type == PDF_MIME_TYPE:
            return self._extract_pdf(file.content)
        if file.mime_type in WORD_MIME_TYPES:
            return self._extract_word(file.content)
        if file.mime_type in IMAGE_MIME_TYPES:
            return self._extract_image(file.content, file.mime_type)
        raise UnsupportedDocumentTypeError(f"Unsupported file type: {file.mime_type}")

    def _extract_pdf(self, content: bytes) -> ExtractedText:
        try:
            text = self._pdf_extractor.extract(content)
        except PdfExtractionError as exc:
            raise ExtractionError("Failed to extract text from PDF") from exc

        if text.strip():
            Log.info("PDF text layer extracted", chars=len(text))
            return ExtractedText(text=text, source=ExtractionSource.PDF_TEXT)

        Log.info("PDF has no text layer, falling back to OCR")
        try:
            text = self._ocr_client.recognize(content, PDF_MIME_TYPE)
        except OcrError as exc:
            raise ExtractionError(
                "Failed to process PDF with OCR. "
                "The document may be corrupted or unreadable."
            ) from exc
        return ExtractedText(text=text, source=ExtractionSource.OCR)

    def _extract_word(self, content: bytes) -> ExtractedText:
        text = self._word_extractor.extract(content)
        if not text.strip():
            raise NoTextFoundError("No text content found in Word document")
        Log.info("Word document text extracted", chars=len(text))
        return ExtractedText(text=text, source=ExtractionSource.WORD)

    def _extract_image(self, content: bytes, mime_type: str) -> ExtractedText:
        try:
            text = self._ocr_client.recognize(content, mime_type)
        except OcrError as exc:
            raise ExtractionError("Failed to extract text from image using OCR") from exc
        return ExtractedText(text=text, source=ExtractionSource.OCR)
