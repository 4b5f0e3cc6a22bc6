from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation rule set: valid, or invalid with a reason."""

    is_valid: bool
    error: str | None = None
    value: str | None = None

    @classmethod
    def ok(cls, value: str | None = None) -> "ValidationResult":
        return cls(is_valid=True, value=value)

    @classmethod
    def invalid(cls, error: str) -> "ValidationResult":
        return cls(is_valid=False, error=error)
