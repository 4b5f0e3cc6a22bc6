class TranslationError(Exception):
    """Raised when a single text could not be translated."""


class TranslationNetworkError(TranslationError):
    """Raised when the translation provider is unreachable or unauthenticated."""
