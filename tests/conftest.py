import io
import logging
import shutil

import pytest
import structlog

from runcase.config import build_expectation


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configured by CLI invocations so later tests start clean."""
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)


@pytest.fixture
def capture() -> io.StringIO:
    """An in-memory diagnostic sink."""
    return io.StringIO()


@pytest.fixture
def discard() -> io.StringIO:
    """A sink whose contents the test ignores."""
    return io.StringIO()


@pytest.fixture
def require_sh() -> None:
    if shutil.which("sh") is None:
        pytest.skip("sh is not available")


@pytest.fixture
def echo_foo_expectation(require_sh):
    return build_expectation(["echo", "foo"], exit_code=0, stdout="foo\n")
