"""Example analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from legal_analyzer.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Returns a fixed, schema-conforming analysis. No network calls."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "documentType": "Example Agreement",
        "summary": "An example analysis produced without contacting an AI provider.",
        "keyPoints": ["The document was processed by the offline example provider"],
        "riskAssessment": {"level": "LOW", "risks": [], "redFlags": []},
        "keyTerms": [],
        "recommendations": ["Configure a real analysis provider for production use"],
        "importantClauses": [],
    }

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        top_p: float,
        max_output_tokens: int,
    ) -> str:
        _ = model, prompt, temperature, top_p, max_output_tokens
        return json.dumps(self.DEFAULT_RESPONSE)
