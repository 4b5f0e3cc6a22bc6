import json
import re

from legal_analyzer.analysis.exceptions import AnalysisValidationError
from legal_analyzer.analysis.fallback import build_unparsed_analysis
from legal_analyzer.analysis.models import AnalysisResult
from legal_analyzer.analysis.validator import has_required_fields, validate_and_build
from legal_analyzer.logging.logger import Log

# First "{" through last "}", which also skips markdown code fences.
_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def parse_analysis_response(raw_response: str) -> AnalysisResult:
    """Decode the model answer into an AnalysisResult.

    Never raises: answers without a usable JSON object degrade to a
    best-effort result that keeps the raw text.
    """
    match = _JSON_OBJECT.search(raw_response)
    if match is None:
        Log.warning("AI response contains no JSON object")
        return build_unparsed_analysis(raw_response)

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        Log.warning("AI response JSON could not be decoded", error=str(exc))
        return build_unparsed_analysis(raw_response)

    if not isinstance(parsed, dict) or not has_required_fields(parsed):
        Log.warning("AI response is missing required fields")
        return build_unparsed_analysis(raw_response)

    try:
        return validate_and_build(parsed)
    except AnalysisValidationError as exc:
        Log.warning("AI response failed validation", error=str(exc))
        return build_unparsed_analysis(raw_response)
