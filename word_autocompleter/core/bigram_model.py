# bigram_model.py
# Next-word model conditioned on the previous word.
# Each conditioning word owns its own FrequencyTrainer / FrequencyIndex.

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import FormatError, InvalidInputError, TrainerFinalizedError
from .prediction_entry import PredictionEntry
from .simple_model import FrequencyIndex, FrequencyTrainer

logger = logging.getLogger(__name__)

BigramRecord = Tuple[str, str, int]


class BigramIndex:
    """Immutable mapping conditioning word -> FrequencyIndex."""

    __slots__ = ("_indexes",)

    def __init__(self, indexes: Dict[str, FrequencyIndex]) -> None:
        self._indexes = dict(indexes)

    def predict(self, conditioning_word: str, prefix: str) -> List[PredictionEntry]:
        """
        Predict completions of `prefix` that followed `conditioning_word`
        in training. An unseen conditioning word yields [].
        """
        if not isinstance(prefix, str) or not prefix:
            raise InvalidInputError("prefix must be a non-empty string")
        index = self._indexes.get(conditioning_word)
        if index is None:
            return []
        return index.predict(prefix)

    def get(self, conditioning_word: str) -> Optional[FrequencyIndex]:
        return self._indexes.get(conditioning_word)

    def conditioning_words(self) -> List[str]:
        return sorted(self._indexes)

    # record form -------------------------------------------------------------
    def to_record_form(self) -> List[BigramRecord]:
        """(conditioning word, word, score) triples ordered by both keys."""
        out: List[BigramRecord] = []
        for word1 in sorted(self._indexes):
            for word2, score in self._indexes[word1].to_record_form():
                out.append((word1, word2, score))
        return out

    @classmethod
    def from_record_form(cls, records: Iterable[BigramRecord]) -> "BigramIndex":
        """Group triples by conditioning word. Raises FormatError on bad input."""
        grouped: Dict[str, List[Tuple[str, int]]] = defaultdict(list)
        for record in records:
            try:
                word1, word2, score = record  # type: ignore[misc]
            except (TypeError, ValueError):
                raise FormatError(f"expected a (word1, word2, score) triple, got {record!r}") from None
            if not isinstance(word1, str) or not word1:
                raise FormatError(f"conditioning word must be a non-empty string, got {word1!r}")
            grouped[word1].append((word2, score))

        indexes = {w: FrequencyIndex.from_record_form(pairs) for w, pairs in grouped.items()}
        logger.debug("rebuilt bigram index: %d conditioning words", len(indexes))
        return cls(indexes)

    # introspection -------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._indexes)

    def __contains__(self, conditioning_word: object) -> bool:
        return conditioning_word in self._indexes

    def __iter__(self) -> Iterator[str]:
        return iter(self.conditioning_words())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigramIndex):
            return NotImplemented
        return self._indexes == other._indexes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BigramIndex(conditioning_words={len(self._indexes)})"


class BigramTrainer:
    """
    Counts word pairs. The last token of each train() call is kept as the
    pending word so the pair spanning two calls is still counted:
    train_str("... end") then train_str("start ...") counts (end, start).

    The very first token of the whole stream has no predecessor. It only
    seeds the pending word and is never counted as a completion.
    """

    def __init__(self) -> None:
        self._outer: Optional[Dict[str, FrequencyTrainer]] = {}
        self._pending: Optional[str] = None

    def train(self, tokens: Iterable[str]) -> None:
        if isinstance(tokens, str):
            raise TypeError("train() takes a sequence of tokens, use train_str() for text")
        outer = self._live_outer()
        prev = self._pending
        for word in tokens:
            if not word:
                continue
            if prev is not None:
                inner = outer.get(prev)
                if inner is None:
                    inner = outer[prev] = FrequencyTrainer()
                inner.train_word(word)
            prev = word
        self._pending = prev

    def train_str(self, text: str) -> None:
        """Train on `text` split on single spaces."""
        self.train(text.split(" "))

    # inspection -------------------------------------------------------------
    @property
    def pending_word(self) -> Optional[str]:
        return self._pending

    def score_of(self, word1: str, word2: str) -> Optional[int]:
        inner = self._live_outer().get(word1)
        if inner is None:
            return None
        return inner.score_of(word2)

    @property
    def finalized(self) -> bool:
        return self._outer is None

    def __len__(self) -> int:
        return len(self._live_outer())

    # finalize -------------------------------------------------------------
    def finalize(self) -> BigramIndex:
        """Consume the trainer, finalizing each inner trainer on its own."""
        outer = self._live_outer()
        self._outer = None
        self._pending = None
        index = BigramIndex({w: t.finalize() for w, t in outer.items()})
        logger.debug("finalized bigram trainer: %d conditioning words", len(index))
        return index

    def _live_outer(self) -> Dict[str, FrequencyTrainer]:
        if self._outer is None:
            raise TrainerFinalizedError("bigram trainer was already finalized")
        return self._outer

    def __repr__(self) -> str:
        if self._outer is None:
            return "BigramTrainer(finalized)"
        return f"BigramTrainer(conditioning_words={len(self._outer)}, pending={self._pending!r})"
