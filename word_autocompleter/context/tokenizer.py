# word_autocompleter/context/tokenizer.py
# simple whitespace tokenizer


def simple_tokenize(s: str):
    """
    Return list of tokens (words) split on any whitespace.
    Empty pieces never make it into the list.
    """
    if not s:
        return []
    return [t for t in s.split() if t]
