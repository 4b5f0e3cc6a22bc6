"""Field-level translation of a finished analysis."""

from dataclasses import replace

from legal_analyzer.analysis.models import AnalysisResult, ImportantClause, KeyTerm
from legal_analyzer.logging.logger import Log
from legal_analyzer.translation.client_base import BaseTranslationClient
from legal_analyzer.translation.exceptions import TranslationError, TranslationNetworkError
from legal_analyzer.translation.languages import (
    FALLBACK_LANGUAGES,
    SUPPORTED_LANGUAGES,
    Language,
)


class Translator:
    """Translates the user-facing strings of an AnalysisResult.

    Structural fields (document type, risk level, key-term names, clause
    locations) are kept verbatim. A failure on one string keeps that string's
    original text; an unreachable provider abandons the whole translation.
    """

    def __init__(
        self,
        *,
        client: BaseTranslationClient,
        default_language: str = "en",
    ) -> None:
        self._client = client
        self._default_language = default_language

    @property
    def default_language(self) -> str:
        return self._default_language

    def translate_analysis(self, analysis: AnalysisResult, target_language: str) -> AnalysisResult:
        """Return a translated copy, or ``analysis`` itself for the default language."""
        if target_language == self._default_language:
            return analysis

        try:
            translated = self._translate_fields(analysis, target_language)
        except TranslationNetworkError as exc:
            Log.error(
                "Translation provider unavailable, returning untranslated analysis",
                target_language=target_language,
                error=str(exc),
            )
            return analysis

        Log.info("Analysis translated", target_language=target_language)
        return translated

    def translate_text(self, text: str, target_language: str) -> str:
        """Translate one string; keeps the original if the provider rejects it.

        Raises:
            TranslationNetworkError: when the provider is unreachable.
        """
        if not isinstance(text, str) or not text.strip():
            return text
        try:
            return self._client.translate(text, target_language)
        except TranslationNetworkError:
            raise
        except TranslationError as exc:
            Log.warning(
                "Text translation failed, keeping original",
                target_language=target_language,
                error=str(exc),
            )
            return text
        except Exception:
            Log.exception(
                "Unexpected translation failure, keeping original",
                target_language=target_language,
            )
            return text

    def translate_list(self, items: list[str], target_language: str) -> list[str]:
        return [self.translate_text(item, target_language) for item in items]

    def supported_languages(self) -> list[Language]:
        """Curated catalog when the provider answers, a short default list otherwise."""
        try:
            provider_codes = self._client.get_languages()
        except Exception as exc:
            Log.warning("Could not fetch provider language catalog", error=str(exc))
            return list(FALLBACK_LANGUAGES)
        Log.debug(f"Provider reports {len(provider_codes)} languages")
        return list(SUPPORTED_LANGUAGES)

    def _translate_fields(self, analysis: AnalysisResult, target: str) -> AnalysisResult:
        risk_assessment = replace(
            analysis.risk_assessment,
            risks=self.translate_list(analysis.risk_assessment.risks, target),
            red_flags=self.translate_list(analysis.risk_assessment.red_flags, target),
        )
        return replace(
            analysis,
            summary=self.translate_text(analysis.summary, target),
            key_points=self.translate_list(analysis.key_points, target),
            risk_assessment=risk_assessment,
            key_terms=[
                KeyTerm(
                    term=key_term.term,
                    explanation=self.translate_text(key_term.explanation, target),
                )
                for key_term in analysis.key_terms
            ],
            recommendations=self.translate_list(analysis.recommendations, target),
            important_clauses=[
                ImportantClause(
                    clause=self.translate_text(clause.clause, target),
                    location=clause.location,
                    importance=self.translate_text(clause.importance, target),
                    plain_language=self.translate_text(clause.plain_language, target),
                )
                for clause in analysis.important_clauses
            ],
        )
