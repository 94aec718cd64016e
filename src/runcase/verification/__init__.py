#
# src/runcase/verification/__init__.py
#
"""
Execution and verification sub-package for runcase.
"""
from .executor import SubprocessExecutor
from .protocols import (
    CommandExecutor,
    DiagnosticSink,
    ExecutionResult,
    TerminationStatus,
    Verdict,
)
from .verifier import Verifier, evaluate, quote_text, verify

__all__ = [
    "CommandExecutor",
    "DiagnosticSink",
    "ExecutionResult",
    "SubprocessExecutor",
    "TerminationStatus",
    "Verdict",
    "Verifier",
    "evaluate",
    "quote_text",
    "verify",
]

# 🔼⚙️
