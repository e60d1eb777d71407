# tests/conftest.py - shared fixtures

import pytest

from word_autocompleter.core.simple_model import FrequencyTrainer

PASSAGE = (
    "anybody can become angry that is easy but to be "
    "angry with the right person and to the right degree "
    "and at the right time and for the right purpose "
    "and in the right way that is not within everybody's "
    "power and is not easy"
)


@pytest.fixture
def passage():
    return PASSAGE


@pytest.fixture
def passage_index():
    return FrequencyTrainer.from_str(PASSAGE).finalize()


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text(
        "The quick brown fox jumps over the lazy dog.\n"
        "The right time, the right place!\n"
        "\n"
        "Then the rain came.\n",
        encoding="utf-8",
    )
    return path
