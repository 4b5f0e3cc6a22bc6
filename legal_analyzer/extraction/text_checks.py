MIN_LETTER_RATIO = 0.3


def letter_ratio(text: str) -> float:
    """Share of alphabetic characters among the non-whitespace characters."""
    visible = [char for char in text if not char.isspace()]
    if not visible:
        return 0.0
    letters = sum(1 for char in visible if char.isalpha())
    return letters / len(visible)


def is_readable_text(text: str | None, min_letter_ratio: float = MIN_LETTER_RATIO) -> bool:
    """True when ``text`` is non-empty and mostly made of letters.

    Output of OCR on noise or of a PDF with only numbers and symbols fails
    this check.
    """
    if not text or not text.strip():
        return False
    return letter_ratio(text) >= min_letter_ratio
