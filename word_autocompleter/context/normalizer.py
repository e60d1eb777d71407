# word_autocompleter/context/normalizer.py
import re

_strip_re = re.compile(r"[^a-z ]")  # only lowercase ascii letters and spaces survive


def clean_line(s: str) -> str:
    """
    Prepare one corpus line for training.
    ASCII capitals are folded to lower case, spaces are kept and
    everything else (digits, punctuation, tabs, non-ascii) is dropped.
    """
    if not s:
        return ""
    s = s.rstrip("\r\n")
    s = "".join(ch.lower() if "A" <= ch <= "Z" else ch for ch in s)
    return _strip_re.sub("", s)
