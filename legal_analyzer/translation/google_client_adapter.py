import requests
from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import translate_v2

from legal_analyzer.translation.client_base import BaseTranslationClient
from legal_analyzer.translation.exceptions import TranslationError, TranslationNetworkError

_UNREACHABLE_ERRORS = (
    requests.ConnectionError,
    requests.Timeout,
    auth_exceptions.GoogleAuthError,
    google_exceptions.ServiceUnavailable,
    google_exceptions.DeadlineExceeded,
    google_exceptions.Unauthorized,
    google_exceptions.Forbidden,
)


class GoogleTranslateClientAdapter(BaseTranslationClient):
    """Google Cloud Translation (v2 basic) client.

    Credentials are resolved lazily so the service can start without them;
    a missing credential surfaces as ``TranslationNetworkError``.
    """

    def __init__(self) -> None:
        self._client: translate_v2.Client | None = None

    def translate(self, text: str, target_language: str) -> str:
        try:
            result = self._get_client().translate(
                text,
                target_language=target_language,
                format_="text",
            )
        except _UNREACHABLE_ERRORS as exc:
            raise TranslationNetworkError(f"Translation provider unreachable: {exc}") from exc
        except (google_exceptions.GoogleAPIError, requests.RequestException) as exc:
            raise TranslationError(f"Translation to {target_language} failed: {exc}") from exc

        translated = result.get("translatedText") if isinstance(result, dict) else None
        if not isinstance(translated, str):
            raise TranslationError("Translation provider returned no text")
        return translated

    def get_languages(self) -> list[str]:
        try:
            languages = self._get_client().get_languages()
        except (
            google_exceptions.GoogleAPIError,
            auth_exceptions.GoogleAuthError,
            requests.RequestException,
        ) as exc:
            raise TranslationNetworkError(f"Could not fetch language catalog: {exc}") from exc
        return [item["language"] for item in languages if "language" in item]

    def _get_client(self) -> translate_v2.Client:
        if self._client is None:
            try:
                self._client = translate_v2.Client()
            except auth_exceptions.GoogleAuthError as exc:
                raise TranslationNetworkError(
                    f"Translation credentials unavailable: {exc}"
                ) from exc
        return self._client
