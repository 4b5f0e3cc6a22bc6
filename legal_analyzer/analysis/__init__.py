from legal_analyzer.analysis.analyzer import Analyzer, HeuristicAnalyzer
from legal_analyzer.analysis.base import BaseAnalyzer
from legal_analyzer.analysis.factory import AnalyzerFactory
from legal_analyzer.analysis.models import AnalysisResult

__all__ = ["AnalysisResult", "Analyzer", "AnalyzerFactory", "BaseAnalyzer", "HeuristicAnalyzer"]
