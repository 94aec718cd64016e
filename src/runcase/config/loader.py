#
# src/runcase/config/loader.py
#
"""
Loads a test case document (YAML or TOML) into an Expectation.
"""

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from runcase.config.models import CommandPolicy, Expectation, build_expectation
from runcase.exceptions import ConfigurationError
from runcase.telemetry import get_logger

log = get_logger("config.loader")

KNOWN_FIELDS = frozenset({"command", "stdout", "exit-code"})
TOML_SUFFIXES = frozenset({".toml"})


def _parse_document(text: str, fmt: str, source: str) -> Any:
    if fmt == "toml":
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML: {e}", source=source) from e
    if fmt == "yaml":
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", source=source) from e
    raise ConfigurationError(f"Unsupported document format: '{fmt}'", source=source)


def _expectation_from_mapping(
    data: Any,
    policy: CommandPolicy,
    source: str,
) -> Expectation:
    if data is None:
        raise ConfigurationError("Test case document is empty", source=source)
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Test case document must be a mapping, got {type(data).__name__}",
            source=source,
        )
    if "command" not in data:
        raise ConfigurationError("Missing required field 'command'", source=source)

    unknown = sorted(str(key) for key in data if key not in KNOWN_FIELDS)
    if unknown:
        log.warning("Ignoring unknown fields in test case document", fields=unknown, source=source)

    try:
        expectation = build_expectation(
            data["command"],
            exit_code=data.get("exit-code"),
            stdout=data.get("stdout"),
            policy=policy,
        )
    except ConfigurationError as e:
        if e.source is None:
            e.source = source
            e.add_note(f"Source: '{source}'")
        raise

    log.debug(
        "Test case loaded",
        source=source,
        program=expectation.program,
        argument_count=len(expectation.arguments),
        exit_code=expectation.expected_exit_code,
        checks_stdout=expectation.expected_stdout is not None,
    )
    return expectation


def parse_expectation(
    text: str,
    policy: CommandPolicy = CommandPolicy.STRICT,
    fmt: str = "yaml",
    source: str = "<string>",
) -> Expectation:
    """
    Parses a test case document held in a string.

    Args:
        text: The document contents.
        policy: Handling of single-string commands containing spaces.
        fmt: Either "yaml" or "toml".
        source: Name used in error messages.
    """
    data = _parse_document(text, fmt, source)
    return _expectation_from_mapping(data, policy, source)


def load_expectation(
    path: Path | str,
    policy: CommandPolicy = CommandPolicy.STRICT,
) -> Expectation:
    """
    Reads and validates a test case document from disk.

    Files ending in `.toml` are parsed as TOML, anything else as YAML.

    Raises:
        ConfigurationError: The file cannot be read, parsed or validated.
    """
    path = Path(path)
    load_log = log.bind(path=str(path))
    load_log.info("Loading test case document")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        load_log.error("Failed to read test case document", error=str(e))
        raise ConfigurationError(f"Cannot read test case document: {e}", source=str(path)) from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Test case document is not valid UTF-8: {e}", source=str(path)) from e

    fmt = "toml" if path.suffix.lower() in TOML_SUFFIXES else "yaml"
    return parse_expectation(text, policy=policy, fmt=fmt, source=str(path))

# 🔼⚙️
