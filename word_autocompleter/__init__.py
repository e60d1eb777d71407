"""
word_autocompleter

Frequency based word completion: learn word and word-pair counts from text,
then complete a partially typed word, optionally given the previous word.
"""

from .core import (
    AutocompleteError,
    BigramIndex,
    BigramTrainer,
    FormatError,
    FrequencyIndex,
    FrequencyTrainer,
    InvalidInputError,
    MAX_PREDICTIONS,
    NotFoundError,
    PredictionEntry,
    TrainerFinalizedError,
)

__all__ = [
    "AutocompleteError",
    "BigramIndex",
    "BigramTrainer",
    "FormatError",
    "FrequencyIndex",
    "FrequencyTrainer",
    "InvalidInputError",
    "MAX_PREDICTIONS",
    "NotFoundError",
    "PredictionEntry",
    "TrainerFinalizedError",
]

__version__ = "0.1.0"
