# src/runcase/telemetry/logger/processors.py

"""
Custom structlog processors used by the runcase logging pipeline.
"""

import logging

from structlog.typing import EventDict, WrappedLogger

LOG_EMOJIS = {
    logging.DEBUG: "🐛",
    logging.INFO: "ℹ️",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "💥",
}

_LEVEL_NAMES = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

# Keys that only matter to the stdlib bridge and clutter rendered output.
_EXTRA_KEYS = ("_record", "_from_structlog")


def add_emoji_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefixes the event message with an emoji for its level."""
    level = _LEVEL_NAMES.get(str(event_dict.get("level", method_name)).lower())
    emoji = LOG_EMOJIS.get(level) if level is not None else None
    event = event_dict.get("event")
    if emoji and isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Drops stdlib bridge bookkeeping keys."""
    for key in _EXTRA_KEYS:
        event_dict.pop(key, None)
    return event_dict

# 🔼⚙️
