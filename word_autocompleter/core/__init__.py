"""
word_autocompleter.core

The prediction engine:
 - single-word frequency model (FrequencyTrainer -> FrequencyIndex)
 - previous-word model (BigramTrainer -> BigramIndex)
 - text record format used to persist both
 - error hierarchy
"""

from .errors import (
    AutocompleteError,
    FormatError,
    InvalidInputError,
    NotFoundError,
    TrainerFinalizedError,
)
from .prediction_entry import PredictionEntry
from .simple_model import MAX_PREDICTIONS, FrequencyIndex, FrequencyTrainer
from .bigram_model import BigramIndex, BigramTrainer

__all__ = [
    "AutocompleteError",
    "FormatError",
    "InvalidInputError",
    "NotFoundError",
    "TrainerFinalizedError",
    "PredictionEntry",
    "MAX_PREDICTIONS",
    "FrequencyIndex",
    "FrequencyTrainer",
    "BigramIndex",
    "BigramTrainer",
]
