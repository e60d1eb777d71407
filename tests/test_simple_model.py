# tests/test_simple_model.py
# unit tests for FrequencyTrainer / FrequencyIndex

import pytest

from word_autocompleter.core.errors import FormatError, InvalidInputError, TrainerFinalizedError
from word_autocompleter.core.prediction_entry import PredictionEntry
from word_autocompleter.core.simple_model import (
    MAX_PREDICTIONS,
    FrequencyIndex,
    FrequencyTrainer,
    build_buckets,
)


def test_from_str_counts_words():
    model = FrequencyTrainer.from_str("world domination is my profession hello hello")
    assert model.score_of("world") == 1
    assert model.score_of("hello") == 2
    assert model.score_of("absent") is None


def test_from_tokens_counts_words():
    model = FrequencyTrainer.from_tokens(["rabbit", "rabbit", "hare"])
    assert model.score_of("hare") == 1
    assert model.score_of("rabbit") == 2
    assert len(model) == 2


def test_train_accumulates_across_calls():
    model = FrequencyTrainer()
    model.train_str("hello hello hello there there")
    model.train(["hello", "what", "is", "this"])
    assert model.score_of("hello") == 4
    assert model.score_of("there") == 2
    assert model.score_of("what") == 1


def test_empty_tokens_are_skipped():
    model = FrequencyTrainer()
    model.train_str("  a  b ")
    model.train(["", "a", ""])
    model.train_word("")
    assert model.score_of("") is None
    assert model.score_of("a") == 2
    assert len(model) == 2


def test_scores_equal_occurrence_counts(passage):
    index = FrequencyTrainer.from_str(passage).finalize()
    words = passage.split()
    for entry in index:
        assert entry.score == words.count(entry.word)
    assert len(index) == len(set(words))


def test_finalize_sorts_lexically(passage_index):
    words = [e.word for e in passage_index.entries]
    assert words == sorted(words)
    assert passage_index.entries[0] == PredictionEntry("and", 5)


def test_buckets_point_at_first_word_of_each_run(passage_index):
    entries = passage_index.entries
    assert set(passage_index.buckets) == {e.word[0] for e in entries}
    for c, offset in passage_index.buckets.items():
        assert entries[offset].word[0] == c
        if offset > 0:
            assert entries[offset - 1].word[0] != c


def test_build_buckets_empty():
    assert build_buckets([]) == {}


def test_predict_passage_top_result_is_and(passage, passage_index):
    out = passage_index.predict("a")
    assert out[0].word == "and"
    assert out[0].score == passage.split().count("and") == 5
    assert [e.word for e in out] == ["and", "angry", "anybody", "at"]


def test_predict_ties_keep_lexical_order(passage_index):
    out = passage_index.predict("t")
    assert [(e.word, e.score) for e in out] == [
        ("the", 5),
        ("that", 2),
        ("to", 2),
        ("time", 1),
    ]


def test_predict_longer_prefix(passage_index):
    assert [e.word for e in passage_index.predict("an")] == ["and", "angry", "anybody"]
    assert [e.word for e in passage_index.predict("every")] == ["everybody's"]
    assert passage_index.predict("angrier") == []


def test_predict_unknown_leading_char(passage_index):
    assert passage_index.predict("z") == []
    assert passage_index.predict("q") == []


def test_predict_rejects_empty_prefix(passage_index):
    with pytest.raises(InvalidInputError):
        passage_index.predict("")
    # InvalidInputError is also a ValueError
    with pytest.raises(ValueError):
        passage_index.predict("")


def test_predict_truncates_to_ten():
    tokens = []
    for i, letter in enumerate("abcdefghijkl"):
        tokens += ["w" + letter] * (i + 1)
    index = FrequencyTrainer.from_tokens(tokens).finalize()
    out = index.predict("w")
    assert len(out) == MAX_PREDICTIONS == 10
    assert out[0] == PredictionEntry("wl", 12)
    assert out[-1] == PredictionEntry("wc", 3)
    assert all(a.score >= b.score for a, b in zip(out, out[1:]))


def test_predict_stops_at_bucket_end():
    index = FrequencyTrainer.from_str("ba bb ca cb ab").finalize()
    assert [e.word for e in index.predict("b")] == ["ba", "bb"]


def test_finalize_consumes_trainer():
    model = FrequencyTrainer.from_str("one two")
    model.finalize()
    assert model.finalized
    with pytest.raises(TrainerFinalizedError):
        model.train(["three"])
    with pytest.raises(TrainerFinalizedError):
        model.finalize()
    with pytest.raises(TrainerFinalizedError):
        model.score_of("one")


def test_record_form_round_trip(passage_index):
    records = passage_index.to_record_form()
    assert records == sorted(records)
    rebuilt = FrequencyIndex.from_record_form(reversed(records))
    assert rebuilt == passage_index
    for entry in passage_index:
        for i in range(1, len(entry.word) + 1):
            prefix = entry.word[:i]
            assert rebuilt.predict(prefix) == passage_index.predict(prefix)


@pytest.mark.parametrize(
    "records",
    [
        [("word",)],
        [("", 3)],
        [(None, 3)],
        [("word", "3")],
        [("word", 0)],
        [("word", True)],
        [("word", 1), ("word", 2)],
        [42],
    ],
)
def test_from_record_form_rejects_malformed(records):
    with pytest.raises(FormatError):
        FrequencyIndex.from_record_form(records)


def test_contains(passage_index):
    assert "and" in passage_index
    assert "everybody's" in passage_index
    assert "an" not in passage_index
    assert "" not in passage_index
    assert "zebra" not in passage_index


def test_prediction_entry_validates_fields():
    with pytest.raises(InvalidInputError):
        PredictionEntry("", 1)
    with pytest.raises(InvalidInputError):
        PredictionEntry("word", 0)
    with pytest.raises(InvalidInputError):
        PredictionEntry("word", True)


def test_index_constructor_rejects_duplicate_words():
    with pytest.raises(InvalidInputError):
        FrequencyIndex([PredictionEntry("a", 1), PredictionEntry("b", 1), PredictionEntry("a", 2)])


def test_train_rejects_bare_string():
    model = FrequencyTrainer()
    with pytest.raises(TypeError):
        model.train("hello world")
    assert len(model) == 0
