from setuptools import find_packages, setup

setup(
    name="pagelinker",
    version="0.1.0",
    description="Sibling page link lists for statically rendered content trees",
    packages=find_packages(include=["pagelinker", "pagelinker.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models and command output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # Page headers and YAML output
        "jinja2",  # Page template rendering
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "pagelinker=pagelinker.cli.main:main",
        ],
    },
)
