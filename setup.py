#!/usr/bin/env python3
"""Setup script for bytestream package."""

from setuptools import find_packages, setup

setup(
    name="bytestream",
    version="0.1.0",
    description="Position-tracked byte buffer with typed, endian-aware reads and writes",
    packages=find_packages(include=["bytestream", "bytestream.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest>=7"],
    },
)
