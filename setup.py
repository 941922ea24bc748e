"""Setup script for console-exercises."""

from setuptools import setup, find_packages

setup(
    name="console-exercises",
    version="0.1.0",
    packages=find_packages(include=["console_exercises", "console_exercises.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0.0",
        "typer>=0.12.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "exercises=console_exercises.cli:app",
        ],
    },
    python_requires=">=3.10",
)
