from setuptools import find_packages, setup

setup(
    name="tdiff",
    version="0.1.0",
    description="tdiff - character diffs of strings, files, and program output",
    packages=find_packages(include=["tdiff", "tdiff.*"]),
    python_requires=">=3.11",
    install_requires=[
        "typer<0.26",  # CLI framework; 0.26+ vendors click, breaking the click exception handling
        "click",  # Typer's parser, exceptions caught in the entry point
        "rich",  # Terminal formatting and diff coloring
        "pydantic>=2",  # Config and output schema validation
        "PyYAML",  # YAML test cases and --display yaml
        "tomli-w",  # Writing TOML test cases
        "pygments",  # Highlighted JSON/YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "tdiff=tdiff.cli:main",
        ],
    },
)
