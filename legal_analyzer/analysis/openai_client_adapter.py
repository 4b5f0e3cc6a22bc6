import httpx
import openai

from legal_analyzer.analysis.client_base import BaseAnalysisClient
from legal_analyzer.analysis.exceptions import AnalysisError, AnalysisNetworkError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the OpenAI-compatible chat API.

    Gemini is reached through Google's OpenAI-compatible endpoint by passing
    its ``base_url``.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        top_p: float,
        max_output_tokens: int,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                top_p=top_p,
                max_tokens=max_output_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.OpenAIError as exc:
            raise AnalysisError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise AnalysisError("AI returned empty response")
        return content
