from setuptools import find_packages, setup

setup(
    name="nodelinks",
    version="1.0.0",
    description="One shared node_modules for many projects, with registry mirror selection",
    packages=find_packages(include=["nodelinks", "nodelinks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI framework
        "pydantic>=2",  # Settings, catalog and output schemas
        "rich",  # Terminal formatting and prompts
        "pyyaml",  # YAML command output
        "pygments",  # Output highlighting on a TTY
        "aiohttp",  # Concurrent mirror latency probes
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-timeout>=2.1",
        ],
        "dev": [
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
            "nodelinks=nodelinks.cli:main",
        ],
    },
)
