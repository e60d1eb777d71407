# model_store.py - persistence for the trained indexes and corpus reading

# handles:
# - unigram index  <-> "<word>,<score>" text file
# - bigram index   <-> "<word1> <word2>,<score>" text file
# - reading a training corpus line by line
# record encoding/decoding lives in core.record_codec, this module only does file I/O

import logging
import os
from typing import Iterator

from word_autocompleter.core import record_codec
from word_autocompleter.core.bigram_model import BigramIndex
from word_autocompleter.core.errors import FormatError, NotFoundError
from word_autocompleter.core.simple_model import FrequencyIndex

logger = logging.getLogger(__name__)


# Helper Functions ---------------
def _ensure_parent(path: str) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)


def _open_existing(path: str, what: str):
    try:
        return open(path, "r", encoding="utf-8")
    except FileNotFoundError:
        raise NotFoundError(f"{what} not found: {path}") from None
    except OSError as e:
        # directories, permission problems: nothing readable at that path
        raise NotFoundError(f"{what} cannot be opened: {path} ({e.strerror})") from e


def _decoded_lines(f, path: str) -> Iterator[str]:
    """Iterate a text file, turning bad UTF-8 into a FormatError."""
    try:
        yield from f
    except UnicodeDecodeError as e:
        raise FormatError(f"{path} is not valid UTF-8 ({e.reason})") from e


# Unigram Persistence -------------------------
def save_unigram(index: FrequencyIndex, path: str) -> int:
    """
    Write the index to `path`, one "<word>,<score>" line per entry in word order.
    Returns the number of lines written.
    """
    lines = list(record_codec.dump_unigram(index))
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.writelines(lines)
    logger.info("saved unigram index to %s (%d entries)", path, len(lines))
    return len(lines)


def load_unigram(path: str) -> FrequencyIndex:
    """
    Read an index written by save_unigram.
    Raises NotFoundError if the file is missing, FormatError on a bad line.
    """
    with _open_existing(path, "unigram model") as f:
        index = record_codec.load_unigram(_decoded_lines(f, path))
    logger.info("loaded unigram index from %s (%d entries)", path, len(index))
    return index


# Bigram Persistence --------------------------
def save_bigram(index: BigramIndex, path: str) -> int:
    """Write the bigram index sorted by (conditioning word, word)."""
    lines = list(record_codec.dump_bigram(index))
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.writelines(lines)
    logger.info("saved bigram index to %s (%d pairs)", path, len(lines))
    return len(lines)


def load_bigram(path: str) -> BigramIndex:
    with _open_existing(path, "bigram model") as f:
        index = record_codec.load_bigram(_decoded_lines(f, path))
    logger.info("loaded bigram index from %s (%d conditioning words)", path, len(index))
    return index


# Corpus ------------------
def read_corpus(path: str) -> Iterator[str]:
    """
    Yield the lines of a training corpus without their line endings.
    Raises NotFoundError if the file is missing (on first iteration),
    FormatError if it is not valid UTF-8.
    """
    with _open_existing(path, "corpus") as f:
        for line in _decoded_lines(f, path):
            yield line.rstrip("\r\n")
