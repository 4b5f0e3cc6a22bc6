from dataclasses import dataclass, field
from enum import Enum

from legal_analyzer.analysis.exceptions import AnalysisValidationError


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True)
class RiskAssessment:
    """Overall risk level with the risks and red flags behind it."""

    level: RiskLevel
    risks: list[str] = field(default_factory=list)
    red_flags: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.level, RiskLevel):
            raise AnalysisValidationError(
                f"'riskAssessment.level' must be one of "
                f"{[level.value for level in RiskLevel]}, got {self.level!r}"
            )


@dataclass(frozen=True)
class KeyTerm:
    """Legal term with a plain-language explanation."""

    term: str
    explanation: str = ""


@dataclass(frozen=True)
class ImportantClause:
    """A clause worth attention, located and explained."""

    clause: str
    location: str = ""
    importance: str = ""
    plain_language: str = ""


@dataclass(frozen=True)
class AnalysisResult:
    """Structured legal analysis of one document.

    ``note`` is set only by the heuristic fallback; ``raw_analysis`` only when
    the model answer could not be decoded into this shape.
    """

    document_type: str
    summary: str
    key_points: list[str]
    risk_assessment: RiskAssessment
    key_terms: list[KeyTerm] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    important_clauses: list[ImportantClause] = field(default_factory=list)
    note: str | None = None
    raw_analysis: str | None = None

    def __post_init__(self) -> None:
        if not self.document_type or not isinstance(self.document_type, str):
            raise AnalysisValidationError("'documentType' must be a non-empty string")
        if not self.summary or not isinstance(self.summary, str):
            raise AnalysisValidationError("'summary' must be a non-empty string")
        if not self.key_points:
            raise AnalysisValidationError("'keyPoints' must be a non-empty list")
        if not isinstance(self.risk_assessment, RiskAssessment):
            raise AnalysisValidationError("'riskAssessment' must be a RiskAssessment")
