import os

from setuptools import find_packages, setup


def read_requirements():
    """
    Reads and processes the requirements file, returning a list of standard dependencies.

    Excludes lines that are blank or start with `#` (comments).
    """
    req_file = os.path.join(os.path.dirname(__file__), "requirements.txt")
    with open(req_file, encoding="utf-8") as f:
        return [
            line.strip()
            for line in f
            if line.strip() and not line.startswith("#")
        ]


setup(
    name="testgrid-config",
    version="0.1.0",
    packages=find_packages(),  # Automatically detect all packages
    package_data={"testgrid_config.config": ["examples/*.yaml"]},
    install_requires=read_requirements(),
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "testgrid-config-validate=testgrid_config.validation.cli:main",
        ],
    },
    python_requires=">=3.9",
)
