"""Language catalog shared by request validation and the translator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    code: str
    name: str


SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language("en", "English"),
    Language("es", "Spanish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("it", "Italian"),
    Language("pt", "Portuguese"),
    Language("ru", "Russian"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("zh", "Chinese (Simplified)"),
    Language("zh-TW", "Chinese (Traditional)"),
    Language("ar", "Arabic"),
    Language("hi", "Hindi"),
    Language("th", "Thai"),
    Language("vi", "Vietnamese"),
    Language("nl", "Dutch"),
    Language("sv", "Swedish"),
    Language("da", "Danish"),
    Language("no", "Norwegian"),
    Language("fi", "Finnish"),
    Language("pl", "Polish"),
    Language("tr", "Turkish"),
    Language("he", "Hebrew"),
    Language("cs", "Czech"),
    Language("hu", "Hungarian"),
    Language("ro", "Romanian"),
    Language("bg", "Bulgarian"),
    Language("hr", "Croatian"),
    Language("sk", "Slovak"),
    Language("sl", "Slovenian"),
    Language("et", "Estonian"),
    Language("lv", "Latvian"),
    Language("lt", "Lithuanian"),
    Language("mt", "Maltese"),
    Language("id", "Indonesian"),
    Language("ms", "Malay"),
    Language("tl", "Filipino"),
    Language("sw", "Swahili"),
    Language("fa", "Persian"),
    Language("ur", "Urdu"),
    Language("bn", "Bengali"),
    Language("gu", "Gujarati"),
    Language("ta", "Tamil"),
    Language("te", "Telugu"),
    Language("kn", "Kannada"),
    Language("ml", "Malayalam"),
    Language("mr", "Marathi"),
    Language("ne", "Nepali"),
    Language("si", "Sinhala"),
)

# Served when the provider catalog cannot be reached.
FALLBACK_LANGUAGES: tuple[Language, ...] = (
    Language("en", "English"),
    Language("es", "Spanish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("it", "Italian"),
    Language("pt", "Portuguese"),
    Language("zh", "Chinese"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("ar", "Arabic"),
    Language("hi", "Hindi"),
    Language("ru", "Russian"),
)

_CANONICAL_CODES: dict[str, str] = {
    language.code.lower(): language.code for language in SUPPORTED_LANGUAGES
}


def canonical_language_code(code: str) -> str | None:
    """Return the catalog spelling of ``code`` or None when unsupported."""
    return _CANONICAL_CODES.get(code.strip().lower())
