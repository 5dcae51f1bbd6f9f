"""Pytest configuration — ensures the project root is importable."""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from number_speller.converter import NumberConverter  # noqa: E402
from number_speller.lexicon import (  # noqa: E402
    DEFAULT_SCALES,
    DEFAULT_TENS,
    DEFAULT_UNITS,
    default_lexicon,
)


@pytest.fixture
def lexicon():
    """The embedded English lexicon."""
    return default_lexicon()


@pytest.fixture
def converter():
    """A converter over the embedded English lexicon."""
    return NumberConverter()


@pytest.fixture
def minus_lexicon_file(tmp_path):
    """A JSON lexicon that spells negation as 'minus'."""
    path = tmp_path / "lexicon.json"
    path.write_text(
        json.dumps(
            {
                "units": list(DEFAULT_UNITS),
                "tens": list(DEFAULT_TENS),
                "scales": list(DEFAULT_SCALES),
                "negation": "minus",
            }
        ),
        encoding="utf-8",
    )
    return path
