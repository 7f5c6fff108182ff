"""Validation result container for dashboard configuration validation."""

from dataclasses import dataclass, field
from typing import Iterable, List

from .errors import ConfigValidationError, ConfigViolation


@dataclass
class ValidationResult:
    """
    Result of validating a dashboard configuration, or of one check within it.

    Attributes:
        valid: True if no violations were found.
        errors: Every violation found, in the order the checks reported them.

    Examples:
        >>> result = ValidationResult()
        >>> print(result.valid)
        True
        >>> result.add_error(MissingFieldError("TestGroups"))
        >>> print(result.valid)
        False
        >>> print(result)
        Validation FAILED with 1 error(s)
        ...
    """

    valid: bool = True
    errors: List[ConfigViolation] = field(default_factory=list)

    def add_error(self, violation: ConfigViolation) -> None:
        """Add a violation and mark the result as invalid."""
        self.errors.append(violation)
        self.valid = False

    def extend(self, violations: Iterable[ConfigViolation]) -> None:
        """Add several violations, keeping their order."""
        for violation in violations:
            self.add_error(violation)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        if not other.valid:
            self.valid = False

    def raise_for_errors(self) -> None:
        """Raise :class:`ConfigValidationError` if any violation was found."""
        if not self.valid:
            raise ConfigValidationError(self.errors)

    def __str__(self) -> str:
        """Numbered report listing every violation."""
        if self.valid:
            return "Validation passed: no errors."

        lines: List[str] = [
            f"Validation FAILED with {len(self.errors)} error(s)",
            "",
            "ERRORS:",
        ]
        for i, error in enumerate(self.errors, 1):
            lines.append(f"  {i}. {error}")
        return "\n".join(lines)

    def __bool__(self) -> bool:
        """Allow boolean context: ``if result: ...``."""
        return self.valid
