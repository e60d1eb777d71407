# simple_model.py
# Single-word frequency model.
#
# FrequencyTrainer counts words in a dict: cheap to increment, useless for
# prefix search because the keys have no order. finalize() turns it into a
# FrequencyIndex that keeps the entries in lexical order plus a bucket index
# from leading character to the first entry starting with it, so a query only
# scans the run of words sharing the prefix's first character.

from __future__ import annotations

import logging
from itertools import islice
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple
from types import MappingProxyType

from .errors import FormatError, InvalidInputError, TrainerFinalizedError
from .prediction_entry import PredictionEntry

logger = logging.getLogger(__name__)

MAX_PREDICTIONS = 10

Record = Tuple[str, int]


def build_buckets(entries: Sequence[PredictionEntry]) -> Dict[str, int]:
    """
    Map each leading character to the offset of its first entry.
    `entries` must already be sorted by word.
    """
    buckets: Dict[str, int] = {}
    last_c = None
    for ix, entry in enumerate(entries):
        c = entry.word[0]
        if c != last_c:
            buckets[c] = ix
            last_c = c
    return buckets


class FrequencyIndex:
    """
    Immutable, lexically sorted word index answering prefix queries.

    Built by FrequencyTrainer.finalize() or from persisted records with
    FrequencyIndex.from_record_form().
    """

    __slots__ = ("_entries", "_buckets")

    def __init__(self, entries: Iterable[PredictionEntry]) -> None:
        self._entries: Tuple[PredictionEntry, ...] = tuple(sorted(entries, key=lambda e: e.word))
        for a, b in zip(self._entries, self._entries[1:]):
            if a.word == b.word:
                raise InvalidInputError(f"duplicate word {a.word!r}")
        self._buckets: Dict[str, int] = build_buckets(self._entries)

    # prediction ------------------------------------------------------------
    def predict(self, prefix: str) -> List[PredictionEntry]:
        """
        Return up to MAX_PREDICTIONS entries starting with `prefix`,
        highest score first. Equal scores keep lexical order.
        Raises InvalidInputError for an empty prefix.
        """
        if not isinstance(prefix, str) or not prefix:
            raise InvalidInputError("prefix must be a non-empty string")

        first = prefix[0]
        start = self._buckets.get(first)
        if start is None:
            return []

        matches: List[PredictionEntry] = []
        for entry in islice(self._entries, start, None):
            if entry.word[0] != first:
                break
            if entry.word.startswith(prefix):
                matches.append(entry)

        # list.sort is stable, so ties stay in lexical order
        matches.sort(key=lambda e: e.score, reverse=True)
        return matches[:MAX_PREDICTIONS]

    # record form -------------------------------------------------------------
    def to_record_form(self) -> List[Record]:
        """(word, score) pairs in ascending word order."""
        return [(e.word, e.score) for e in self._entries]

    @classmethod
    def from_record_form(cls, records: Iterable[Record]) -> "FrequencyIndex":
        """
        Rebuild an index from (word, score) pairs in any order.
        Raises FormatError if a record is malformed or a word repeats.
        """
        entries: List[PredictionEntry] = []
        seen = set()
        for record in records:
            word, score = _check_record(record)
            if word in seen:
                raise FormatError(f"duplicate word {word!r}")
            seen.add(word)
            entries.append(PredictionEntry(word=word, score=score))
        index = cls(entries)
        logger.debug("rebuilt index: %d entries, %d buckets", len(index), len(index._buckets))
        return index

    # introspection -------------------------------------------------------------
    @property
    def entries(self) -> Tuple[PredictionEntry, ...]:
        return self._entries

    @property
    def buckets(self) -> Mapping[str, int]:
        return MappingProxyType(self._buckets)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PredictionEntry]:
        return iter(self._entries)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        start = self._buckets.get(word[0])
        if start is None:
            return False
        for entry in islice(self._entries, start, None):
            if entry.word[0] != word[0] or entry.word > word:
                return False
            if entry.word == word:
                return True
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyIndex):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"FrequencyIndex(entries={len(self._entries)}, buckets={len(self._buckets)})"


def _check_record(record: object) -> Record:
    try:
        word, score = record  # type: ignore[misc]
    except (TypeError, ValueError):
        raise FormatError(f"expected a (word, score) pair, got {record!r}") from None
    if not isinstance(word, str) or not word:
        raise FormatError(f"word must be a non-empty string, got {word!r}")
    if isinstance(score, bool) or not isinstance(score, int):
        raise FormatError(f"score for {word!r} must be an integer, got {score!r}")
    if score < 1:
        raise FormatError(f"score for {word!r} must be >= 1, got {score}")
    return word, score


class FrequencyTrainer:
    """
    Mutable word counter. Feed it tokens with train()/train_str(), then call
    finalize() once to get a FrequencyIndex. finalize() consumes the trainer:
    any later call raises TrainerFinalizedError.
    """

    def __init__(self) -> None:
        self._counts: Optional[Dict[str, int]] = {}

    @classmethod
    def from_str(cls, text: str) -> "FrequencyTrainer":
        trainer = cls()
        trainer.train_str(text)
        return trainer

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "FrequencyTrainer":
        trainer = cls()
        trainer.train(tokens)
        return trainer

    # training -------------------------------------------------------------
    def train(self, tokens: Iterable[str]) -> None:
        """
        Count every non-empty token. Empty tokens are skipped.
        A bare str is rejected with TypeError, use train_str() for text.
        """
        if isinstance(tokens, str):
            raise TypeError("train() takes a sequence of tokens, use train_str() for text")
        counts = self._live_counts()
        for word in tokens:
            if word:
                counts[word] = counts.get(word, 0) + 1

    def train_str(self, text: str) -> None:
        """Train on `text` split on single spaces."""
        self.train(text.split(" "))

    def train_word(self, word: str) -> None:
        counts = self._live_counts()
        if word:
            counts[word] = counts.get(word, 0) + 1

    # inspection -------------------------------------------------------------
    def score_of(self, word: str) -> Optional[int]:
        """Current count of `word`, None if it was never seen."""
        return self._live_counts().get(word)

    @property
    def finalized(self) -> bool:
        return self._counts is None

    def __len__(self) -> int:
        return len(self._live_counts())

    # finalize -------------------------------------------------------------
    def finalize(self) -> FrequencyIndex:
        """Consume the trainer and return the sorted, bucketed index."""
        counts = self._live_counts()
        self._counts = None
        index = FrequencyIndex(PredictionEntry(word=w, score=c) for w, c in counts.items())
        logger.debug("finalized trainer: %d entries, %d buckets", len(index), len(index.buckets))
        return index

    def _live_counts(self) -> Dict[str, int]:
        if self._counts is None:
            raise TrainerFinalizedError("trainer was already finalized")
        return self._counts

    def __repr__(self) -> str:
        if self._counts is None:
            return "FrequencyTrainer(finalized)"
        return f"FrequencyTrainer(words={len(self._counts)})"
