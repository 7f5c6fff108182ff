"""
Schema Module

Pydantic models for the dashboard configuration document handed to the
validation engine.
"""

from .configuration import (
    Configuration,
    Dashboard,
    DashboardGroup,
    DashboardTab,
    TestGroup,
)

__all__ = [
    "Configuration",
    "Dashboard",
    "DashboardGroup",
    "DashboardTab",
    "TestGroup",
]
