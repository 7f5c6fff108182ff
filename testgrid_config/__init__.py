"""
testgrid_config: static validation for dashboard configurations.

A dashboard configuration declares test groups, dashboards whose tabs show
those test groups, and dashboard groups that collect dashboards. This
package checks such a document for duplicate names, dangling references,
orphaned test groups and dashboards claimed by several groups, and reports
every problem it finds in one pass.

Submodules are loaded lazily (PEP 562) so that importing testgrid_config
does not eagerly pull in pydantic or PyYAML.
"""

__version__ = "0.1.0"

# Lazy attribute mapping: name -> (relative_module, attribute_name)
_LAZY_IMPORTS = {
    # Config loaders
    "load_configuration_from_dict": (".config", "load_configuration_from_dict"),
    "load_configuration_from_yaml": (".config", "load_configuration_from_yaml"),
    # Schema
    "Configuration": (".schema", "Configuration"),
    "Dashboard": (".schema", "Dashboard"),
    "DashboardGroup": (".schema", "DashboardGroup"),
    "DashboardTab": (".schema", "DashboardTab"),
    "TestGroup": (".schema", "TestGroup"),
    # Validation
    "ConfigError": (".validation", "ConfigError"),
    "ConfigValidationError": (".validation", "ConfigValidationError"),
    "ConfigViolation": (".validation", "ConfigViolation"),
    "ConfigurationValidator": (".validation", "ConfigurationValidator"),
    "DuplicateNameError": (".validation", "DuplicateNameError"),
    "MissingEntityError": (".validation", "MissingEntityError"),
    "MissingFieldError": (".validation", "MissingFieldError"),
    "ValidationResult": (".validation", "ValidationResult"),
    "normalize": (".validation", "normalize"),
    "validate": (".validation", "validate"),
    "validate_or_raise": (".validation", "validate_or_raise"),
}

# Submodule names that can be accessed as attributes
_LAZY_SUBMODULES = {
    "config",
    "schema",
    "utils",
    "validation",
}


def __getattr__(name: str):
    if name in _LAZY_IMPORTS:
        import importlib

        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path, __name__)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    if name in _LAZY_SUBMODULES:
        import importlib

        module = importlib.import_module(f".{name}", __name__)
        globals()[name] = module
        return module
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    return list(_LAZY_IMPORTS.keys()) + list(_LAZY_SUBMODULES) + ["__version__"]


__all__ = ["__version__"] + list(_LAZY_IMPORTS.keys())
