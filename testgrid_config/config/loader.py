"""
YAML and dict loaders for dashboard configurations.

Provides functions to build a ``Configuration`` from a YAML file or a
Python dictionary. Pydantic handles nested model construction; the loaders
never run the validation engine themselves.

Usage::

    from testgrid_config.config import load_configuration_from_yaml

    config = load_configuration_from_yaml("path/to/config.yaml")

    config = load_configuration_from_dict({
        "test_groups": [{"name": "test_group_1"}],
        "dashboards": [...],
    })
"""

from pathlib import Path
from typing import Union

import yaml

from testgrid_config.schema import Configuration


def load_configuration_from_yaml(path: Union[str, Path]) -> Configuration:
    """Load a Configuration from a YAML file.

    An empty file yields an empty ``Configuration``.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A ``Configuration`` instance.

    Raises:
        FileNotFoundError: If the YAML file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.
        ValueError: If the top level of the document is not a mapping.
        pydantic.ValidationError: If the parsed data does not fit the schema.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dashboard config file not found: {path}")

    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise yaml.YAMLError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a YAML mapping at top level in {path}, "
            f"got {type(data).__name__}"
        )

    return load_configuration_from_dict(data)


def load_configuration_from_dict(data: dict) -> Configuration:
    """Load a Configuration from a Python dictionary.

    Keys follow the upstream dashboard config format: ``test_groups``,
    ``dashboards`` (with ``dashboard_tab`` entries carrying
    ``test_group_name``) and ``dashboard_groups`` (with ``dashboard_names``).
    Unknown keys are ignored.

    Raises:
        pydantic.ValidationError: If the data does not fit the schema.
    """
    return Configuration(**data)
