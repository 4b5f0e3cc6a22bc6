"""AI-powered legal document analyzer."""

from legal_analyzer.analysis.base import BaseAnalyzer
from legal_analyzer.analysis.client_base import BaseAnalysisClient
from legal_analyzer.analysis.exceptions import AnalysisError
from legal_analyzer.analysis.fallback import build_fallback_analysis
from legal_analyzer.analysis.models import AnalysisResult
from legal_analyzer.analysis.prompt_builder import PromptBuilder
from legal_analyzer.analysis.response_parser import parse_analysis_response
from legal_analyzer.logging.logger import Log


class Analyzer(BaseAnalyzer):
    """Asks each configured model in turn until one answers."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model_names: list[str],
        prompt_builder: PromptBuilder | None = None,
        temperature: float = 0.2,
        top_p: float = 0.8,
        max_output_tokens: int = 8192,
    ) -> None:
        self._client = client
        self._model_names = list(model_names)
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._temperature = max(0.0, min(0.2, temperature))
        self._top_p = top_p
        self._max_output_tokens = max_output_tokens

    def analyze(self, text: str, language: str = "en") -> AnalysisResult:
        prompt = self._prompt_builder.build(text, language)
        Log.debug(f"Analysis prompt:\n{prompt}")

        try:
            raw_response = self._generate_with_fallback(prompt)
        except AnalysisError as exc:
            Log.error("All analysis models failed, returning heuristic analysis", error=str(exc))
            return build_fallback_analysis(text)

        Log.debug(f"AI raw response:\n{raw_response}")
        try:
            result = parse_analysis_response(raw_response)
        except Exception:
            Log.exception("AI response handling failed, returning heuristic analysis")
            return build_fallback_analysis(text)
        Log.info(
            "Analysis complete",
            document_type=result.document_type,
            key_points=len(result.key_points),
        )
        return result

    def _generate_with_fallback(self, prompt: str) -> str:
        if not self._model_names:
            raise AnalysisError("No analysis models configured")

        last_index = len(self._model_names) - 1
        for index, model in enumerate(self._model_names):
            Log.info("Trying analysis model", model=model)
            try:
                raw_response = self._client.generate(
                    model=model,
                    prompt=prompt,
                    temperature=self._temperature,
                    top_p=self._top_p,
                    max_output_tokens=self._max_output_tokens,
                )
            except AnalysisError as exc:
                Log.warning("Analysis model failed", model=model, error=str(exc))
                if index == last_index:
                    raise
                continue
            except Exception as exc:
                Log.exception("Analysis model raised unexpectedly", model=model)
                if index == last_index:
                    raise AnalysisError(f"Analysis client failed: {exc}") from exc
                continue
            Log.info("Analysis model succeeded", model=model)
            return raw_response
        raise AnalysisError("No analysis model produced a response")


class HeuristicAnalyzer(BaseAnalyzer):
    """Used when no AI credential is configured."""

    def analyze(self, text: str, language: str = "en") -> AnalysisResult:
        _ = language
        Log.info("AI analysis not configured, returning heuristic analysis")
        return build_fallback_analysis(text)
