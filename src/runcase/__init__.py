#
# src/runcase/__init__.py
#
"""
runcase: run a single command and check its exit code and output.
"""

from runcase.config import CommandPolicy, Expectation, build_expectation, load_expectation
from runcase.exceptions import (
    AmbiguousStringCommandError,
    ConfigurationError,
    EmptyCommandError,
    ExecutionIOError,
    RuncaseError,
)
from runcase.verification import ExecutionResult, TerminationStatus, Verdict, Verifier, verify

__all__ = [
    "AmbiguousStringCommandError",
    "CommandPolicy",
    "ConfigurationError",
    "EmptyCommandError",
    "ExecutionIOError",
    "ExecutionResult",
    "Expectation",
    "RuncaseError",
    "TerminationStatus",
    "Verdict",
    "Verifier",
    "build_expectation",
    "load_expectation",
    "verify",
]

# 🔼⚙️
