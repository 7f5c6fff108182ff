"""Static validation engine for dashboard configurations.

Checks a ``Configuration`` for duplicate names, dangling references,
orphaned test groups and dashboards claimed by more than one dashboard
group. Every check runs and every violation is reported; nothing stops at
the first problem.

Names are compared by their normalized form (see :func:`normalize`), so
``"test_group_1"`` and ``"TEST GROUP 1"`` refer to the same entity.
"""

import re
from typing import Dict, Iterable, List, Set

from testgrid_config.utils.logging_utils import get_logger

from .errors import (
    ConfigError,
    DuplicateNameError,
    MissingEntityError,
    MissingFieldError,
)
from .result import ValidationResult

LOGGER = get_logger(__name__)

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")

UNREFERENCED_TEST_GROUP_MESSAGE = (
    "Each Test Group must be referenced by at least 1 Dashboard Tab."
)
OVERCLAIMED_DASHBOARD_MESSAGE = "A Dashboard cannot be in more than 1 Dashboard Group."


def normalize(name: str) -> str:
    """Return the comparison key for ``name``.

    Lower-cases the name and drops every character that is not an ASCII
    letter or digit.

    >>> normalize("pun-_*ctuation Y_E_A_H!")
    'punctuationyeah'
    """
    return _NON_ALPHANUMERIC.sub("", name.lower())


def validate_unique(names: Iterable[str], entity: str) -> ValidationResult:
    """Report every name that repeats an earlier one after normalization.

    Each repeat produces one :class:`DuplicateNameError` carrying the
    normalized name and ``entity``, in input order.
    """
    result = ValidationResult()
    seen: Set[str] = set()
    for name in names:
        key = normalize(name)
        if key in seen:
            result.add_error(DuplicateNameError(key, entity))
        else:
            seen.add(key)
    return result


def validate_references_exist(config) -> ValidationResult:
    """Check references between test groups, dashboards and dashboard groups.

    Reports, in this order:

    1. tabs whose test group does not exist (``MissingEntityError``),
    2. test groups no tab references (``ConfigError``),
    3. dashboard group entries naming a missing dashboard
       (``MissingEntityError``),
    4. dashboards listed by more than one dashboard group (``ConfigError``,
       one per dashboard).
    """
    result = ValidationResult()
    result.merge(_check_tab_references(config))
    result.merge(_check_dashboard_group_references(config))
    return result


def _check_tab_references(config) -> ValidationResult:
    result = ValidationResult()
    referenced: Dict[str, bool] = {
        normalize(test_group.name): False for test_group in config.test_groups or []
    }

    for dashboard in config.dashboards or []:
        for tab in dashboard.dashboard_tab or []:
            key = normalize(tab.test_group_name)
            if key not in referenced:
                result.add_error(MissingEntityError(tab.test_group_name, "TestGroup"))
            else:
                referenced[key] = True

    for test_group in config.test_groups or []:
        if not referenced[normalize(test_group.name)]:
            result.add_error(
                ConfigError(test_group.name, "TestGroup", UNREFERENCED_TEST_GROUP_MESSAGE)
            )
    return result


def _check_dashboard_group_references(config) -> ValidationResult:
    result = ValidationResult()
    # First declaration wins when dashboard names collide
    dashboards: Dict[str, str] = {}
    for dashboard in config.dashboards or []:
        dashboards.setdefault(normalize(dashboard.name), dashboard.name)

    claims: Dict[str, int] = {}
    overclaimed: List[str] = []
    for dashboard_group in config.dashboard_groups or []:
        claimed_here: Set[str] = set()
        for dashboard_name in dashboard_group.dashboard_names or []:
            key = normalize(dashboard_name)
            if key not in dashboards:
                result.add_error(MissingEntityError(dashboard_name, "Dashboard"))
                continue
            if key in claimed_here:
                continue
            claimed_here.add(key)
            claims[key] = claims.get(key, 0) + 1
            if claims[key] == 2:
                overclaimed.append(key)

    for key in overclaimed:
        result.add_error(
            ConfigError(dashboards[key], "Dashboard", OVERCLAIMED_DASHBOARD_MESSAGE)
        )
    return result


class ConfigurationValidator:
    """
    Static validator for dashboard configurations.

    Runs the required-field, uniqueness, cross-kind name and reference
    checks in a fixed order and collects every violation into one
    :class:`ValidationResult`. Instances keep no state between calls.

    Usage:
        >>> validator = ConfigurationValidator()
        >>> result = validator.validate(config)
        >>> if not result:
        ...     print(result)
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, config) -> ValidationResult:
        """Validate *config* and return a :class:`ValidationResult`."""
        result = ValidationResult()

        self._run_step("required fields", result, self._check_required_fields(config))
        self._run_step(
            "dashboard names",
            result,
            validate_unique(_names(config.dashboards), "Dashboard"),
        )
        self._run_step(
            "dashboard group names",
            result,
            validate_unique(_names(config.dashboard_groups), "DashboardGroup"),
        )
        self._run_step(
            "test group names",
            result,
            validate_unique(_names(config.test_groups), "TestGroup"),
        )
        self._run_step("cross-kind names", result, self._check_cross_kind_names(config))
        self._run_step("references", result, validate_references_exist(config))

        if result.valid:
            LOGGER.debug("Configuration validation passed")
        else:
            LOGGER.debug(
                "Configuration validation failed with %d violation(s)",
                len(result.errors),
            )
        return result

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    @staticmethod
    def _run_step(label: str, result: ValidationResult, step: ValidationResult) -> None:
        LOGGER.trace("Checked %s", label)
        if not step.valid:
            LOGGER.debug("Check '%s' found %d violation(s)", label, len(step.errors))
        result.merge(step)

    @staticmethod
    def _check_required_fields(config) -> ValidationResult:
        result = ValidationResult()
        if not config.test_groups:
            result.add_error(MissingFieldError("TestGroups"))
        if not config.dashboards:
            result.add_error(MissingFieldError("Dashboards"))
        return result

    @staticmethod
    def _check_cross_kind_names(config) -> ValidationResult:
        """Dashboards and dashboard groups share one namespace."""
        result = ValidationResult()
        group_names = {normalize(name) for name in _names(config.dashboard_groups)}
        reported: Set[str] = set()
        for name in _names(config.dashboards):
            key = normalize(name)
            if key in group_names and key not in reported:
                reported.add(key)
                result.add_error(DuplicateNameError(key, "Dashboard/DashboardGroup"))
        return result


def _names(entities) -> List[str]:
    return [entity.name for entity in entities or []]


def validate(config) -> ValidationResult:
    """Convenience function: validate a dashboard configuration.

    Args:
        config: A ``Configuration`` (or any object with ``test_groups``,
            ``dashboards`` and ``dashboard_groups`` attributes).

    Returns:
        A :class:`ValidationResult` carrying every violation found.
    """
    return ConfigurationValidator().validate(config)


def validate_or_raise(config) -> None:
    """Validate *config*, raising ``ConfigValidationError`` if it is invalid."""
    validate(config).raise_for_errors()
