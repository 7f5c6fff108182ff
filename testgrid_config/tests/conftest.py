"""Shared test helpers for the testgrid_config test suite.

Provides factory functions for building configuration documents with
sensible defaults.

Usage in test files::

    from testgrid_config.tests.conftest import make_config, make_dashboard
"""

import os

from testgrid_config.schema import (
    Configuration,
    Dashboard,
    DashboardGroup,
    DashboardTab,
    TestGroup,
)

#: Directory holding the example YAML configurations.
EXAMPLES_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "config",
    "examples",
)


def make_dashboard(name: str, *test_group_names: str) -> Dashboard:
    """Build a ``Dashboard`` with one tab per test group name."""
    return Dashboard(
        name=name,
        dashboard_tab=[
            DashboardTab(name=f"tab_{i}", test_group_name=group)
            for i, group in enumerate(test_group_names, 1)
        ],
    )


def make_config(
    test_groups=("test_group_1",),
    dashboards=None,
    dashboard_groups=None,
) -> Configuration:
    """Build a ``Configuration``.

    ``test_groups`` is a sequence of names. ``dashboards`` defaults to one
    ``dashboard_1`` with a tab per test group, which keeps the document
    valid. ``dashboard_groups`` maps group name to listed dashboard names.
    """
    if dashboards is None:
        dashboards = [make_dashboard("dashboard_1", *test_groups)]
    return Configuration(
        test_groups=[TestGroup(name=name) for name in test_groups],
        dashboards=dashboards,
        dashboard_groups=[
            DashboardGroup(name=name, dashboard_names=list(names))
            for name, names in (dashboard_groups or {}).items()
        ],
    )
