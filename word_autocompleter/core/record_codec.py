# record_codec.py
# Text record format for persisted models.
#
#   unigram:  <word>,<score>\n
#   bigram:   <word1> <word2>,<score>\n
#
# Writers emit lines sorted by (word1, word2). Readers accept any order.
# The score is split off the last comma and word1 ends at the first space.

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from .bigram_model import BigramIndex
from .errors import FormatError
from .simple_model import FrequencyIndex


def _check_word(word: str, what: str) -> None:
    if not word:
        raise FormatError(f"{what} is empty")
    if "\n" in word or "\r" in word:
        raise FormatError(f"{what} {word!r} contains a line break")


def _parse_score(raw: str, line_no: Optional[int]) -> int:
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        raise FormatError(f"score {raw!r} is not a number", line_no)
    score = int(raw)
    if score < 1:
        raise FormatError(f"score must be >= 1, got {score}", line_no)
    return score


def _split_record(line: str, line_no: Optional[int]) -> Tuple[str, int]:
    key, sep, raw_score = line.rstrip("\r\n").rpartition(",")
    if not sep:
        raise FormatError(f"missing ',' in {line!r}", line_no)
    return key, _parse_score(raw_score, line_no)


# unigram -------------------------------------------------------------
def format_unigram_line(word: str, score: int) -> str:
    _check_word(word, "word")
    return f"{word},{score}\n"


def parse_unigram_line(line: str, line_no: Optional[int] = None) -> Tuple[str, int]:
    word, score = _split_record(line, line_no)
    if not word:
        raise FormatError("word is empty", line_no)
    return word, score


def dump_unigram(index: FrequencyIndex) -> Iterator[str]:
    """Yield one record line per entry, in ascending word order."""
    for word, score in index.to_record_form():
        yield format_unigram_line(word, score)


def load_unigram(lines: Iterable[str]) -> FrequencyIndex:
    """Parse record lines into a FrequencyIndex. Blank lines are ignored."""
    return FrequencyIndex.from_record_form(_parse_lines(lines, parse_unigram_line))


# bigram -------------------------------------------------------------
def format_bigram_line(word1: str, word2: str, score: int) -> str:
    _check_word(word1, "conditioning word")
    _check_word(word2, "word")
    if " " in word1:
        raise FormatError(f"conditioning word {word1!r} contains a space")
    return f"{word1} {word2},{score}\n"


def parse_bigram_line(line: str, line_no: Optional[int] = None) -> Tuple[str, str, int]:
    key, score = _split_record(line, line_no)
    word1, sep, word2 = key.partition(" ")
    if not sep:
        raise FormatError(f"missing ' ' between words in {key!r}", line_no)
    if not word1:
        raise FormatError("conditioning word is empty", line_no)
    if not word2:
        raise FormatError("word is empty", line_no)
    return word1, word2, score


def dump_bigram(index: BigramIndex) -> Iterator[str]:
    """Yield one record line per pair, sorted by (word1, word2)."""
    for word1, word2, score in index.to_record_form():
        yield format_bigram_line(word1, word2, score)


def load_bigram(lines: Iterable[str]) -> BigramIndex:
    return BigramIndex.from_record_form(_parse_lines(lines, parse_bigram_line))


def _parse_lines(lines, parse):
    seen = set()
    for line_no, line in enumerate(lines, 1):
        if not line.strip():
            continue
        record = parse(line, line_no)
        key = record[:-1]
        if key in seen:
            raise FormatError(f"duplicate key {' '.join(key)!r}", line_no)
        seen.add(key)
        yield record
