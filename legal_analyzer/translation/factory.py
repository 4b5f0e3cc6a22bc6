from legal_analyzer.config.settings import Settings
from legal_analyzer.translation.client_base import BaseTranslationClient
from legal_analyzer.translation.example_client_adapter import ExampleTranslationClientAdapter
from legal_analyzer.translation.google_client_adapter import GoogleTranslateClientAdapter
from legal_analyzer.translation.translator import Translator


class TranslatorFactory:
    """Creates the translator for ``settings.translation_provider``."""

    ADAPTERS: dict[str, type[BaseTranslationClient]] = {
        "google": GoogleTranslateClientAdapter,
        "example": ExampleTranslationClientAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> Translator:
        provider = settings.translation_provider.strip().lower()
        adapter_cls = cls.ADAPTERS.get(provider)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown translation provider '{provider}'. Choose from: {sorted(cls.ADAPTERS)}"
            )
        return Translator(client=adapter_cls(), default_language=settings.default_language)
