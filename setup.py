#!/usr/bin/env python3
"""
Setup script for rsconfig package.
"""

from setuptools import setup, find_packages

setup(
    name="rsconfig",
    version="0.1.0",
    description="Typed configuration registry for a search engine module",
    author="rsconfig Team",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",
        "rich>=13.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "rsconfig=rsconfig.cli.main:main",
        ],
    },
)
