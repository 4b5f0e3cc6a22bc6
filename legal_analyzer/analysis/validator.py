"""Builds an AnalysisResult from the model's decoded JSON."""

from collections.abc import Callable
from typing import Any, TypeVar

from legal_analyzer.analysis.exceptions import AnalysisValidationError
from legal_analyzer.analysis.models import (
    AnalysisResult,
    ImportantClause,
    KeyTerm,
    RiskAssessment,
    RiskLevel,
)
from legal_analyzer.logging.logger import Log

T = TypeVar("T")

REQUIRED_FIELDS = ("documentType", "summary", "keyPoints")


def has_required_fields(data: dict[str, Any]) -> bool:
    """True when the three mandatory top-level fields are present and truthy."""
    return all(data.get(name) for name in REQUIRED_FIELDS)


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate decoded JSON and build an AnalysisResult.

    Optional sections may be absent or null and default to empty lists;
    malformed key terms and clauses are skipped individually. A
    missing ``riskAssessment`` defaults to level MEDIUM. The risk level is
    matched case-insensitively.

    Raises:
        AnalysisValidationError: on any shape violation.
    """
    for name in REQUIRED_FIELDS:
        if name not in data:
            raise AnalysisValidationError(f"Missing required top-level field: {name}")
    return AnalysisResult(
        document_type=_require_string(data["documentType"], "documentType"),
        summary=_require_string(data["summary"], "summary"),
        key_points=_build_string_list(data["keyPoints"], "keyPoints"),
        risk_assessment=_build_risk_assessment(data.get("riskAssessment")),
        key_terms=_build_items(data.get("keyTerms"), "keyTerms", _build_key_term),
        recommendations=_build_string_list(data.get("recommendations"), "recommendations"),
        important_clauses=_build_items(
            data.get("importantClauses"), "importantClauses", _build_clause
        ),
    )


def _require_string(raw: Any, name: str) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise AnalysisValidationError(f"'{name}' must be a non-empty string")
    return raw.strip()


def _optional_string(raw: Any, name: str) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise AnalysisValidationError(f"'{name}' must be a string")
    return raw


def _require_list(raw: Any, name: str) -> list[Any]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise AnalysisValidationError(f"'{name}' must be a list")
    return raw


def _build_string_list(raw: Any, name: str) -> list[str]:
    items = _require_list(raw, name)
    result: list[str] = []
    for i, item in enumerate(items):
        if not isinstance(item, str):
            raise AnalysisValidationError(f"'{name}[{i}]' must be a string")
        if item.strip():
            result.append(item.strip())
    return result


def _build_items(raw: Any, name: str, build: Callable[[Any, int], T]) -> list[T]:
    items: list[T] = []
    for i, item in enumerate(_require_list(raw, name)):
        try:
            items.append(build(item, i))
        except AnalysisValidationError as exc:
            Log.warning("Skipping malformed analysis item", field=name, error=str(exc))
    return items


def _build_risk_assessment(raw: Any) -> RiskAssessment:
    if raw is None:
        return RiskAssessment(level=RiskLevel.MEDIUM)
    if not isinstance(raw, dict):
        raise AnalysisValidationError("'riskAssessment' must be an object")
    level = raw.get("level")
    if not isinstance(level, str):
        raise AnalysisValidationError("'riskAssessment.level' must be a string")
    try:
        risk_level = RiskLevel(level.strip().upper())
    except ValueError as exc:
        raise AnalysisValidationError(
            f"'riskAssessment.level' must be one of "
            f"{[item.value for item in RiskLevel]}, got {level!r}"
        ) from exc
    return RiskAssessment(
        level=risk_level,
        risks=_build_string_list(raw.get("risks"), "riskAssessment.risks"),
        red_flags=_build_string_list(raw.get("redFlags"), "riskAssessment.redFlags"),
    )


def _build_key_term(raw: Any, index: int) -> KeyTerm:
    if not isinstance(raw, dict):
        raise AnalysisValidationError(f"'keyTerms[{index}]' must be an object")
    return KeyTerm(
        term=_require_string(raw.get("term"), f"keyTerms[{index}].term"),
        explanation=_optional_string(raw.get("explanation"), f"keyTerms[{index}].explanation"),
    )


def _build_clause(raw: Any, index: int) -> ImportantClause:
    if not isinstance(raw, dict):
        raise AnalysisValidationError(f"'importantClauses[{index}]' must be an object")
    prefix = f"importantClauses[{index}]"
    return ImportantClause(
        clause=_require_string(raw.get("clause"), f"{prefix}.clause"),
        location=_optional_string(raw.get("location"), f"{prefix}.location"),
        importance=_optional_string(raw.get("importance"), f"{prefix}.importance"),
        plain_language=_optional_string(raw.get("plainLanguage"), f"{prefix}.plainLanguage"),
    )
