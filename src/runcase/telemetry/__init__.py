#
# src/runcase/telemetry/__init__.py
#
"""
Logging setup for runcase.
"""

from runcase.telemetry.logger import StructLogger, get_logger, setup_logging

__all__ = ["StructLogger", "get_logger", "setup_logging"]

# 🔼⚙️
