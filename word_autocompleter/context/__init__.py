from .normalizer import clean_line
from .tokenizer import simple_tokenize

__all__ = ["clean_line", "simple_tokenize"]
