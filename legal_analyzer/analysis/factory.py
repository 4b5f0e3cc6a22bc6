from typing import ClassVar

from legal_analyzer.analysis.analyzer import Analyzer, HeuristicAnalyzer
from legal_analyzer.analysis.base import BaseAnalyzer
from legal_analyzer.analysis.example_client_adapter import ExampleClientAdapter
from legal_analyzer.analysis.openai_client_adapter import OpenAIClientAdapter
from legal_analyzer.analysis.prompt_builder import PromptBuilder
from legal_analyzer.config.settings import Settings
from legal_analyzer.logging.logger import Log


class AnalyzerFactory:
    """Creates the configured analyzer."""

    GEMINI_OPENAI_BASE_URL: ClassVar[str] = (
        "https://generativelanguage.googleapis.com/v1beta/openai/"
    )
    PROVIDERS: ClassVar[tuple[str, ...]] = ("example", "gemini", "openai", "openai_compatible")

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create an analyzer; without an API key only heuristic analysis is available."""
        provider = settings.analysis_provider.strip().lower()
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        prompt_builder = PromptBuilder(default_language=settings.default_language)

        if provider == "example":
            return Analyzer(
                client=ExampleClientAdapter(),
                model_names=["example"],
                prompt_builder=prompt_builder,
                temperature=0.0,
            )

        api_key = cls._resolve_api_key(provider, settings)
        if not api_key:
            Log.warning("No API key configured for analysis provider", provider=provider)
            return HeuristicAnalyzer()

        client = OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.analysis_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Analyzer(
            client=client,
            model_names=settings.analysis_model_names,
            prompt_builder=prompt_builder,
            temperature=settings.analysis_temperature,
            top_p=settings.analysis_top_p,
            max_output_tokens=settings.analysis_max_output_tokens,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "gemini":
            return cls.GEMINI_OPENAI_BASE_URL
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            return url
        return None

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.gemini_api_key,
            "openai": settings.openai_api_key,
            "openai_compatible": settings.openai_compatible_api_key,
        }
        return key_map.get(provider, "").strip()
