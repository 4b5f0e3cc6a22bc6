"""Deterministic analyses used when the model is unavailable or unparseable."""

import re

from legal_analyzer.analysis.models import (
    AnalysisResult,
    ImportantClause,
    KeyTerm,
    RiskAssessment,
    RiskLevel,
)

FALLBACK_NOTE = (
    "AI analysis temporarily unavailable. This is a basic analysis based on "
    "document content patterns. Please review the document manually or consult "
    "legal counsel for important decisions."
)

_DOCUMENT_TYPE_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("rent", "lease"), "Rental/Lease Agreement"),
    (("contract", "agreement"), "Contract/Agreement"),
    (("terms", "conditions"), "Terms and Conditions"),
)
_DEFAULT_DOCUMENT_TYPE = "Legal Document"

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_MIN_KEY_POINT_LENGTH = 20
_MAX_KEY_POINTS = 6


def detect_document_type(text: str) -> str:
    """Keyword sniffing; the first matching group wins."""
    lowered = text.lower()
    for keywords, document_type in _DOCUMENT_TYPE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return document_type
    return _DEFAULT_DOCUMENT_TYPE


def build_fallback_analysis(text: str) -> AnalysisResult:
    """Heuristic analysis from keyword scans and static templates."""
    document_type = detect_document_type(text)
    word_count = len(text.split())
    return AnalysisResult(
        document_type=document_type,
        summary=(
            f"This {word_count}-word document appears to be a {document_type.lower()}. "
            "While AI analysis is temporarily unavailable, the document has been "
            "processed and contains standard legal language that should be reviewed "
            "carefully."
        ),
        key_points=[
            "This is a legal document that creates binding obligations",
            "The document contains terms and conditions that affect your rights",
            "Financial obligations or payments may be involved",
            "There may be penalties or consequences for non-compliance",
            "The document likely has specific termination or cancellation terms",
            "Your personal information and data may be collected and used",
        ],
        risk_assessment=RiskAssessment(
            level=RiskLevel.MEDIUM,
            risks=[
                "Unable to perform detailed AI risk assessment - service temporarily unavailable",
                "Legal documents typically contain obligations and potential liabilities",
                "Financial commitments may be present",
                "Please review all terms carefully before signing",
            ],
            red_flags=[
                "AI analysis unavailable - manual review required",
                "Consult legal counsel for complex documents",
            ],
        ),
        key_terms=[
            KeyTerm(
                term="Legal Document",
                explanation=(
                    "A formal document with legal implications that may create "
                    "binding obligations when signed"
                ),
            ),
            KeyTerm(
                term="Terms and Conditions",
                explanation=(
                    "Rules and requirements that you agree to follow by signing "
                    "or using a service"
                ),
            ),
            KeyTerm(
                term="Liability",
                explanation="Legal responsibility for damages, losses, or obligations",
            ),
        ],
        recommendations=[
            "Read the entire document thoroughly before signing",
            "Ask questions about any terms you don't understand",
            "Consider consulting with a legal professional for complex documents",
            "Keep a copy of all signed documents for your records",
            "Review cancellation or termination procedures",
            "Understand your rights and obligations under the agreement",
        ],
        important_clauses=[
            ImportantClause(
                clause="Payment Terms",
                location="Various sections",
                importance="Defines when and how much you need to pay",
                plain_language=(
                    "This tells you exactly when you need to make payments and "
                    "what happens if you're late"
                ),
            ),
            ImportantClause(
                clause="Termination Clause",
                location="Usually near the end",
                importance="Explains how the agreement can be ended",
                plain_language=(
                    "This section tells you how to cancel or end the agreement if needed"
                ),
            ),
        ],
        note=FALLBACK_NOTE,
    )


def extract_key_points(text: str) -> list[str]:
    """Up to six sentence fragments longer than twenty characters."""
    fragments = (fragment.strip() for fragment in _SENTENCE_SPLIT.split(text))
    points = [fragment for fragment in fragments if len(fragment) > _MIN_KEY_POINT_LENGTH]
    return points[:_MAX_KEY_POINTS]


def build_unparsed_analysis(raw_response: str) -> AnalysisResult:
    """Best-effort result for a model answer that did not decode to the schema."""
    key_points = extract_key_points(raw_response) or [
        "The AI response could not be structured; see the raw analysis for details"
    ]
    return AnalysisResult(
        document_type=_DEFAULT_DOCUMENT_TYPE,
        summary=(
            "AI analysis completed successfully. The document has been processed "
            "and contains important legal information that requires careful review."
        ),
        key_points=key_points,
        risk_assessment=RiskAssessment(
            level=RiskLevel.MEDIUM,
            risks=["Document contains legal obligations that should be reviewed"],
        ),
        recommendations=[
            "Review all terms carefully before signing",
            "Consult with a legal professional if needed",
            "Ask questions about unclear provisions",
        ],
        raw_analysis=raw_response,
    )
