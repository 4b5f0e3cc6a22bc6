class AnalysisError(Exception):
    """Raised when AI analysis fails."""


class AnalysisValidationError(AnalysisError):
    """Raised when an analysis does not satisfy the result invariants."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
