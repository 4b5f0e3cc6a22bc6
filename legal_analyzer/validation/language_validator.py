from legal_analyzer.translation.languages import canonical_language_code
from legal_analyzer.validation.models import ValidationResult


def validate_language(code: object) -> ValidationResult:
    """Validate a requested output language; the result carries the canonical code."""
    if not code or not isinstance(code, str):
        return ValidationResult.invalid("Language code is required")

    normalized = code.strip().lower()
    if len(normalized) < 2 or len(normalized) > 5:
        return ValidationResult.invalid("Invalid language code format")

    canonical = canonical_language_code(normalized)
    if canonical is None:
        return ValidationResult.invalid(f"Unsupported language code: {normalized}")

    return ValidationResult.ok(canonical)
