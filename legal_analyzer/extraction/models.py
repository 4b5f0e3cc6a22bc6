from dataclasses import dataclass
from enum import Enum


class ExtractionSource(str, Enum):
    """Which extraction path produced the text."""

    PDF_TEXT = "pdf_text"
    WORD = "word"
    OCR = "ocr"


@dataclass(frozen=True)
class ExtractedText:
    text: str
    source: ExtractionSource
