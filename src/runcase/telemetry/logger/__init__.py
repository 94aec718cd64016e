#
# src/runcase/telemetry/logger/__init__.py
#
from runcase.telemetry.logger.base import StructLogger, get_logger, setup_logging

__all__ = ["StructLogger", "get_logger", "setup_logging"]

# 🔼⚙️
