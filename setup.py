#!/usr/bin/env python3
"""
KVS Setup Script
================
Allows installation of the kvs package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # Development install with test tools
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="kvs",
    version="1.0.0",
    packages=find_packages(include=["kvs", "kvs.*"]),
    python_requires=">=3.10",
    install_requires=[
        "flask>=2.3",
        "werkzeug>=2.3",
        "requests>=2.28",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "kvs=kvs.server:main",
        ],
    },
)
