from pathlib import Path

from legal_analyzer.analysis.prompt_loader import load_json_schema, load_prompt_template

PROMPT_LANGUAGE_NAMES: dict[str, str] = {
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
    "ar": "Arabic",
    "hi": "Hindi",
    "th": "Thai",
    "vi": "Vietnamese",
    "nl": "Dutch",
    "sv": "Swedish",
    "da": "Danish",
    "no": "Norwegian",
    "fi": "Finnish",
    "pl": "Polish",
    "tr": "Turkish",
}


def language_name(code: str) -> str:
    """Display name used in the prompt; unknown codes read as English."""
    return PROMPT_LANGUAGE_NAMES.get(code, "English")


class PromptBuilder:
    """Renders the analysis prompt around a document's full text."""

    def __init__(
        self,
        *,
        template_path: Path | None = None,
        json_schema_path: Path | None = None,
        default_language: str = "en",
    ) -> None:
        self._template = load_prompt_template(template_path)
        self._json_schema = load_json_schema(json_schema_path)
        self._default_language = default_language

    def build(self, document_text: str, language: str) -> str:
        return self._template.format(
            language_instruction=self._language_instruction(language),
            json_schema=self._json_schema,
            document_text=document_text,
        )

    def _language_instruction(self, language: str) -> str:
        if language == self._default_language:
            return ""
        return f"Please provide your analysis in {language_name(language)}."
