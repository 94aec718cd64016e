#
# config/__init__.py
#
"""
Test case configuration sub-package for runcase.

Exports the loading functions and the Expectation model.
"""

from .loader import load_expectation, parse_expectation
from .models import CommandPolicy, Expectation, build_expectation

__all__ = [
    "CommandPolicy",
    "Expectation",
    "build_expectation",
    "load_expectation",
    "parse_expectation",
]

# 🔼⚙️
