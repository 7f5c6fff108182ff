#!/usr/bin/env python
"""CLI tool for validating dashboard configuration files.

Usage::

    python -m testgrid_config.validation.cli config.yaml
    testgrid-config-validate config.yaml other.yaml
"""

import argparse
import sys
from typing import List, Optional

import yaml
from pydantic import ValidationError

from testgrid_config.config import load_configuration_from_yaml
from testgrid_config.utils.logging_utils import get_logger

from .validator import validate

LOGGER = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="testgrid-config-validate",
        description="Validate dashboard configuration YAML files.",
    )
    parser.add_argument("paths", nargs="+", help="YAML configuration file(s)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Validate each file and print every violation found.

    Returns 0 when every file is valid, 1 otherwise.
    """
    args = _build_parser().parse_args(argv)

    failures = 0
    for path in args.paths:
        try:
            config = load_configuration_from_yaml(path)
        except (OSError, ValueError, yaml.YAMLError, ValidationError) as exc:
            print(f"ERROR {path}  -> {exc}")
            failures += 1
            continue

        LOGGER.info("Loaded dashboard configuration from %s", path)
        result = validate(config)
        if result:
            print(f"OK    {path}")
        else:
            print(f"FAIL  {path}")
            print(result)
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
