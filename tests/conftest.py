"""Shared fixtures for the yesno test suite."""

import pytest
from unittest.mock import patch

from yesno.dialogue import Ask, Stop
from yesno.line_io import ScriptedLineIO


@pytest.fixture
def know_dialogue():
    """The two-question dialogue used throughout the transcript tests."""
    return Ask(
        "Do you know X?",
        Ask("Do you like it?", Stop("Good!"), Stop("I can't believe it!")),
        Stop("What a pity!"),
    )


@pytest.fixture
def scripted_io():
    """Factory for ScriptedLineIO instances fed with the given input lines."""

    def _make(*lines):
        return ScriptedLineIO(lines)

    return _make


@pytest.fixture
def mock_config():
    """Patch the config singleton with test-friendly values."""
    test_config = {
        "name_prompt": "Name?",
        "greeting": "Hi {name}, continue?",
        "farewell": "Bye {name}.",
        "reprompt": "y/n please",
    }
    with patch("yesno.config._config", test_config):
        yield test_config
