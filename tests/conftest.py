"""Pytest configuration and fixtures."""

import logging
import os

import pytest

from scriptpad.config import ScriptpadSettings, reset_settings, set_settings

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import clean_runner, cli_invoke  # noqa: F401


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test with default settings and no SCRIPTPAD_ environment.

    Config files in the user's home directory or the working directory must
    not leak into tests either, so both point at an empty temp directory.
    """
    for var in [k for k in os.environ if k.startswith("SCRIPTPAD_")]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)

    reset_settings()
    set_settings(ScriptpadSettings())

    yield

    reset_settings()


@pytest.fixture
def reset_logging_state():
    """Restore root logger handlers and level replaced by configure_logging."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    yield

    for handler in root_logger.handlers.copy():
        root_logger.removeHandler(handler)
        if handler not in original_handlers:
            handler.close()
    root_logger.setLevel(original_level)
    for handler in original_handlers:
        root_logger.addHandler(handler)


@pytest.fixture
def sample_text():
    """A short scene in screenplay text layout."""
    return (
        "INT. DINER - NIGHT\n"
        "\n"
        "Rain streaks the windows.\n"
        + " " * 33
        + "MARGE\n"
        + " " * 20
        + "You're late.\n"
        + " " * 51
        + "CUT TO:"
    )


@pytest.fixture
def dialogue_text(sample_text):
    """The sample scene without its closing transition.

    Every line is within the wrap width, so the dialogue wrap leaves it
    untouched.
    """
    return sample_text.rsplit("\n", 1)[0]
