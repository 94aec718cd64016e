#
# tests/unit/test_logging.py
#
"""
Tests for the structlog setup and custom processors.
"""

import json
import logging
from pathlib import Path

import structlog

from runcase.telemetry import setup_logging
from runcase.telemetry.logger.processors import (
    add_emoji_processor,
    remove_extra_keys_processor,
)


def test_add_emoji_processor_prefixes_event() -> None:
    event_dict = add_emoji_processor(None, "error", {"event": "boom", "level": "error"})
    assert event_dict["event"] == "❌ boom"


def test_add_emoji_processor_ignores_unknown_levels() -> None:
    event_dict = add_emoji_processor(None, "msg", {"event": "plain"})
    assert event_dict["event"] == "plain"


def test_remove_extra_keys_processor() -> None:
    event_dict = remove_extra_keys_processor(
        None, "info", {"event": "x", "_record": object(), "signal": None, "exit_code": 0}
    )
    assert event_dict == {"event": "x", "signal": None, "exit_code": 0}


def test_setup_logging_writes_json_file(tmp_path: Path) -> None:
    log_file = tmp_path / "runcase.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))

    structlog.get_logger("tests").info("Command finished", exit_code=3)
    for handler in logging.getLogger().handlers:
        handler.flush()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    finished = [record for record in records if record["event"].endswith("Command finished")]
    assert finished
    assert finished[0]["exit_code"] == 3
    assert finished[0]["logger"] == "tests"
