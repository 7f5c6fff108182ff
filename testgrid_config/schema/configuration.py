"""
Dashboard configuration schema.

In-memory form of a dashboard configuration document: test groups,
dashboards (each with tabs pointing at test groups) and dashboard groups
(each listing dashboards by name).

The models deliberately accept partial documents. Every field has an empty
default so that the validation engine, not the schema, reports what is
missing.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator


class TestGroup(BaseModel):
    """
    A named group of test results shown on one or more dashboard tabs.

    Examples:
        >>> group = TestGroup(name="ci-kubernetes-e2e")
    """

    __test__ = False  # not a pytest test class

    name: str = Field("", description="Test group name, unique after normalization")


class DashboardTab(BaseModel):
    """
    One tab of a dashboard, displaying a single test group.

    Examples:
        >>> tab = DashboardTab(name="e2e", test_group_name="ci-kubernetes-e2e")
    """

    name: str = Field("", description="Tab name, displayed in the dashboard")

    test_group_name: str = Field(
        "", description="Name of the test group this tab displays"
    )


class Dashboard(BaseModel):
    """
    A dashboard made of ordered tabs.

    Examples:
        >>> dashboard = Dashboard(
        ...     name="sig-release-master",
        ...     dashboard_tab=[
        ...         DashboardTab(name="e2e", test_group_name="ci-kubernetes-e2e")
        ...     ],
        ... )
    """

    name: str = Field("", description="Dashboard name, unique after normalization")

    dashboard_tab: List[DashboardTab] = Field(
        default_factory=list, description="Ordered tabs of this dashboard"
    )

    @field_validator("dashboard_tab", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value


class DashboardGroup(BaseModel):
    """
    A named collection of dashboards.

    Examples:
        >>> group = DashboardGroup(
        ...     name="sig-release",
        ...     dashboard_names=["sig-release-master", "sig-release-1.30"],
        ... )
    """

    name: str = Field(
        "", description="Dashboard group name, unique after normalization"
    )

    dashboard_names: List[str] = Field(
        default_factory=list, description="Names of the dashboards in this group"
    )

    @field_validator("dashboard_names", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value


class Configuration(BaseModel):
    """
    Complete dashboard configuration document.

    ``test_groups`` and ``dashboards`` are required by the validation engine
    but may be empty here; ``dashboard_groups`` is optional.

    Examples:
        >>> config = Configuration(
        ...     test_groups=[TestGroup(name="test_group_1")],
        ...     dashboards=[
        ...         Dashboard(
        ...             name="dashboard_1",
        ...             dashboard_tab=[
        ...                 DashboardTab(name="tab_1", test_group_name="test_group_1")
        ...             ],
        ...         )
        ...     ],
        ... )
    """

    test_groups: List[TestGroup] = Field(
        default_factory=list, description="All test groups"
    )

    dashboards: List[Dashboard] = Field(
        default_factory=list, description="All dashboards"
    )

    dashboard_groups: List[DashboardGroup] = Field(
        default_factory=list, description="All dashboard groups"
    )

    @field_validator("test_groups", "dashboards", "dashboard_groups", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value
