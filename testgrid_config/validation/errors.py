"""Violation records and the aggregate exception for configuration validation.

Violations are immutable values: two violations of the same kind with the
same fields compare equal, so tests can assert on them directly.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class ConfigViolation:
    """Base class for every violation the validation engine reports."""


@dataclass(frozen=True)
class MissingFieldError(ConfigViolation):
    """A required top-level collection is empty or unset."""

    field: str

    def __str__(self) -> str:
        return f"field missing or unset: {self.field}"


@dataclass(frozen=True)
class DuplicateNameError(ConfigViolation):
    """Two entities share a name after normalization.

    ``name`` is the normalized name, ``entity`` the kind label
    (e.g. ``"TestGroup"`` or ``"Dashboard/DashboardGroup"``).
    """

    name: str
    entity: str

    def __str__(self) -> str:
        return f"found duplicate name after normalizing: ({self.entity}) {self.name}"


@dataclass(frozen=True)
class MissingEntityError(ConfigViolation):
    """A reference does not resolve to any entity of the target kind."""

    name: str
    entity: str

    def __str__(self) -> str:
        return f'could not find {self.entity} "{self.name}"'


@dataclass(frozen=True)
class ConfigError(ConfigViolation):
    """A structural rule about an existing entity is broken."""

    name: str
    entity: str
    message: str

    def __str__(self) -> str:
        return f"configuration error for ({self.entity}) {self.name}: {self.message}"


class ConfigValidationError(Exception):
    """Raised with every violation found in a configuration.

    Attributes:
        errors: The violations, in the order the engine reported them.
    """

    def __init__(self, errors: Iterable[ConfigViolation]) -> None:
        self.errors: Tuple[ConfigViolation, ...] = tuple(errors)
        super().__init__(self._format())

    def _format(self) -> str:
        lines = [f"{len(self.errors)} error(s) occurred:"]
        lines.extend(f"  * {error}" for error in self.errors)
        return "\n".join(lines)
