from legal_analyzer.analysis.models import AnalysisResult, ImportantClause, KeyTerm


class AnalysisSerializer:
    """Converts an AnalysisResult to its camelCase JSON wire form."""

    def to_dict(self, result: AnalysisResult) -> dict[str, object]:
        """Optional ``note`` and ``rawAnalysis`` keys appear only when set."""
        payload: dict[str, object] = {
            "documentType": result.document_type,
            "summary": result.summary,
            "keyPoints": list(result.key_points),
            "riskAssessment": {
                "level": result.risk_assessment.level.value,
                "risks": list(result.risk_assessment.risks),
                "redFlags": list(result.risk_assessment.red_flags),
            },
            "keyTerms": [self._key_term_to_dict(t) for t in result.key_terms],
            "recommendations": list(result.recommendations),
            "importantClauses": [self._clause_to_dict(c) for c in result.important_clauses],
        }
        if result.note is not None:
            payload["note"] = result.note
        if result.raw_analysis is not None:
            payload["rawAnalysis"] = result.raw_analysis
        return payload

    def _key_term_to_dict(self, key_term: KeyTerm) -> dict[str, str]:
        return {"term": key_term.term, "explanation": key_term.explanation}

    def _clause_to_dict(self, clause: ImportantClause) -> dict[str, str]:
        return {
            "clause": clause.clause,
            "location": clause.location,
            "importance": clause.importance,
            "plainLanguage": clause.plain_language,
        }
