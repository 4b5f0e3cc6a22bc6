from abc import ABC, abstractmethod

from legal_analyzer.analysis.models import AnalysisResult


class BaseAnalyzer(ABC):
    """Contract for all analysis services."""

    @abstractmethod
    def analyze(self, text: str, language: str = "en") -> AnalysisResult:
        """Produce a structured legal analysis of ``text``.

        Implementations never raise: every failure path ends in a heuristic
        analysis, so callers always receive a valid AnalysisResult.
        """
