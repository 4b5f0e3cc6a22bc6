from abc import ABC, abstractmethod


class BaseTranslationClient(ABC):
    """Contract for machine-translation providers."""

    @abstractmethod
    def translate(self, text: str, target_language: str) -> str:
        """Translate ``text`` into ``target_language``.

        Raises:
            TranslationNetworkError: when the provider cannot be reached.
            TranslationError: when the provider rejects this text.
        """

    @abstractmethod
    def get_languages(self) -> list[str]:
        """Return the language codes the provider supports.

        Raises:
            TranslationError: when the catalog cannot be fetched.
        """
