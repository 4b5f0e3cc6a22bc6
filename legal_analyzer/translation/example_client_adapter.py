"""Offline translation adapter for local development and tests."""

from legal_analyzer.translation.client_base import BaseTranslationClient
from legal_analyzer.translation.languages import SUPPORTED_LANGUAGES


class ExampleTranslationClientAdapter(BaseTranslationClient):
    """Prefixes text with the target code instead of translating it."""

    def translate(self, text: str, target_language: str) -> str:
        return f"[{target_language}] {text}"

    def get_languages(self) -> list[str]:
        return [language.code for language in SUPPORTED_LANGUAGES]
