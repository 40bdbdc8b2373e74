from setuptools import find_packages, setup

setup(
    name="htmllinks",
    version="0.1.0",
    description="Hyperlink discovery and resolution for HTML documents",
    author="William Wieselquist",
    packages=find_packages(include=["htmllinks", "htmllinks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and command output models
        "typer",  # CLI
        "rich",  # Terminal formatting
        "PyYAML",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "htmllinks=htmllinks.cli:main",
        ],
    },
)
