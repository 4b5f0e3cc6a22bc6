"""Tests for AnalyzerFactory."""

from unittest.mock import patch

import pytest

from legal_analyzer.analysis.analyzer import Analyzer, HeuristicAnalyzer
from legal_analyzer.analysis.base import BaseAnalyzer
from legal_analyzer.analysis.factory import AnalyzerFactory
from legal_analyzer.config.settings import Settings


class TestAnalyzerFactory:
    def test_creates_example_analyzer(self) -> None:
        analyzer = AnalyzerFactory.create(Settings(analysis_provider="example"))
        assert isinstance(analyzer, Analyzer)
        result = analyzer.analyze("any text")
        assert result.document_type == "Example Agreement"

    def test_gemini_uses_openai_compatible_endpoint(self) -> None:
        settings = Settings(
            analysis_provider="gemini",
            gemini_api_key="gem-key",
            analysis_timeout_seconds=42,
        )
        with patch("legal_analyzer.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            analyzer = AnalyzerFactory.create(settings)
        assert isinstance(analyzer, Analyzer)
        mock_adapter.assert_called_once_with(
            api_key="gem-key",
            timeout_seconds=42,
            base_url=AnalyzerFactory.GEMINI_OPENAI_BASE_URL,
        )

    def test_openai_uses_default_base_url(self) -> None:
        settings = Settings(analysis_provider="openai", openai_api_key="sk-test")
        with patch("legal_analyzer.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            AnalyzerFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] is None

    def test_openai_compatible_uses_configured_base_url(self) -> None:
        settings = Settings(
            analysis_provider="openai_compatible",
            openai_compatible_api_key="key",
            openai_compatible_base_url="http://localhost:11434/v1",
        )
        with patch("legal_analyzer.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            AnalyzerFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://localhost:11434/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(analysis_provider="openai_compatible", openai_compatible_api_key="key")
        with pytest.raises(ValueError, match="openai_compatible_base_url"):
            AnalyzerFactory.create(settings)

    def test_missing_api_key_gives_heuristic_analyzer(self) -> None:
        settings = Settings(analysis_provider="gemini", gemini_api_key="  ")
        with patch("legal_analyzer.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            analyzer = AnalyzerFactory.create(settings)
        assert isinstance(analyzer, HeuristicAnalyzer)
        assert isinstance(analyzer, BaseAnalyzer)
        mock_adapter.assert_not_called()

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown analysis provider"):
            AnalyzerFactory.create(Settings(analysis_provider="claude"))
