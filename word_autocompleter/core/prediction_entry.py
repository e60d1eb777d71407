# prediction_entry.py
# Value type returned by every prediction engine.

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidInputError


@dataclass(frozen=True)
class PredictionEntry:
    """
    A single completion candidate.
    word: the completed word (never empty)
    score: raw number of times the word was seen in that context (>= 1)
    """
    word: str
    score: int

    def __post_init__(self) -> None:
        if not isinstance(self.word, str) or not self.word:
            raise InvalidInputError(f"word must be a non-empty string, got {self.word!r}")
        if isinstance(self.score, bool) or not isinstance(self.score, int) or self.score < 1:
            raise InvalidInputError(f"score for {self.word!r} must be an integer >= 1, got {self.score!r}")

    def as_row(self) -> Tuple[int, str]:
        """(score, word) pair, the order the CLI renders it in."""
        return (self.score, self.word)
