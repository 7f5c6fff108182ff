"""
Config Module

Loaders for dashboard configuration documents from YAML files and Python dicts.
"""

from .loader import load_configuration_from_dict, load_configuration_from_yaml

__all__ = [
    "load_configuration_from_yaml",
    "load_configuration_from_dict",
]
