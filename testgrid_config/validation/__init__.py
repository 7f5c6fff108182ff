"""
Static validation engine for dashboard configurations.

Catches inconsistent configurations (duplicate names, dangling references,
orphaned test groups, dashboards in several dashboard groups) before they
reach a dashboard server, reporting every problem in one pass.

Usage:
    >>> from testgrid_config.validation import validate
    >>> from testgrid_config.config import load_configuration_from_yaml
    >>>
    >>> config = load_configuration_from_yaml("config.yaml")
    >>> result = validate(config)
    >>>
    >>> if not result:
    ...     print(result)
"""

from .errors import (
    ConfigError,
    ConfigValidationError,
    ConfigViolation,
    DuplicateNameError,
    MissingEntityError,
    MissingFieldError,
)
from .result import ValidationResult
from .validator import (
    ConfigurationValidator,
    normalize,
    validate,
    validate_or_raise,
    validate_references_exist,
    validate_unique,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ConfigViolation",
    "ConfigurationValidator",
    "DuplicateNameError",
    "MissingEntityError",
    "MissingFieldError",
    "ValidationResult",
    "normalize",
    "validate",
    "validate_or_raise",
    "validate_references_exist",
    "validate_unique",
]
