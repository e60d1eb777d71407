# errors.py
# Exceptions raised by the prediction models and the record codec.

from __future__ import annotations

from typing import Optional


class AutocompleteError(Exception):
    """Base class for every error raised by word_autocompleter."""


class InvalidInputError(AutocompleteError, ValueError):
    """Raised when a query cannot be answered, e.g. an empty prefix."""


class FormatError(AutocompleteError, ValueError):
    """Raised when a persisted record is malformed."""

    def __init__(self, msg: str, line_no: Optional[int] = None) -> None:
        if line_no is not None:
            msg = f"line {line_no}: {msg}"
        super().__init__(msg)
        self.line_no = line_no


class NotFoundError(AutocompleteError, FileNotFoundError):
    """Raised when a persisted model or corpus file does not exist."""


class TrainerFinalizedError(AutocompleteError, RuntimeError):
    """Raised when a trainer is used after finalize() consumed it."""
