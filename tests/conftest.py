"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from katana.config.loader import load_config_from_string


@pytest.fixture
def reference_text():
    """Provide a passage exercising every protection rule."""
    return (
        "For years, people in the U.A.E.R. have accepted murky air, tainted waters and "
        "scarred landscapes as the unavoidable price of the country’s meteoric economic "
        "growth. But public dissent over environmental issues has been growing steadily "
        "in the communist nation, and now seems to be building the foundations of a "
        "fledgling green movement! In July alone, two separate demonstrations made "
        "international news when they turned violent after about 1.5 minutes... These "
        "recent successes come after a slew of ever-larger and more violent green "
        "protests over the past few years, as the environmentalist Dr. C. Jeung of "
        "China’s growth becomes harder to ignore.Some ask: “Are demonstrations are "
        "evidence of the public anger and frustration at opaque environmental management "
        "and decision-making?” Others yet say: \"Should we be scared about these "
        "'protests'?\" The man made a quick calculation and found the result to be .625. "
        "(This is another sentence in parens.) This is the last sentence."
    )


@pytest.fixture
def reference_sentences():
    """Provide the expected segmentation of reference_text."""
    return [
        "For years, people in the U.A.E.R. have accepted murky air, tainted waters and "
        "scarred landscapes as the unavoidable price of the country’s meteoric economic "
        "growth.",
        "But public dissent over environmental issues has been growing steadily in the "
        "communist nation, and now seems to be building the foundations of a fledgling "
        "green movement!",
        "In July alone, two separate demonstrations made international news when they "
        "turned violent after about 1.5 minutes...",
        "These recent successes come after a slew of ever-larger and more violent green "
        "protests over the past few years, as the environmentalist Dr. C. Jeung of "
        "China’s growth becomes harder to ignore.",
        "Some ask: “Are demonstrations are evidence of the public anger and frustration "
        "at opaque environmental management and decision-making?”",
        "Others yet say: \"Should we be scared about these 'protests'?\"",
        "The man made a quick calculation and found the result to be .625.",
        "(This is another sentence in parens.)",
        "This is the last sentence.",
    ]


@pytest.fixture
def sample_config_yaml():
    """Provide a sample pipeline config YAML for testing."""
    return """
version: 1
markup:
  parser: html.parser
  fence_code: true
cleaning:
  strip_footnotes: true
  abbreviations:
    "e.g.": "eg"
    "i.e.": "ie"
output:
  sentence_separator: "\\n"
  paragraph_separator: "\\n---\\n"
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded config object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that captures metrics."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags: str):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags: str):
        self.observations.append((name, value))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
