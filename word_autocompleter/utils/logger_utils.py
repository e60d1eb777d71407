# logger_utils.py - logging setup plus timing/metric helpers

import logging
import os
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("word_autocompleter")


def setup_logging(level: str = "INFO", log_path: Optional[str] = None,
                  console: Optional[Console] = None) -> logging.Logger:
    """
    Configure the package logger.
    - rich console handler (colours by level)
    - optional file handler, lines look like: [YYYY-MM-DD HH:MM:SS] INFO    | name | msg
    Calling it again replaces the handlers instead of stacking them.
    """
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    logger.addHandler(RichHandler(console=console, show_path=False, rich_tracebacks=True))

    if log_path:
        os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(fh)

    logger.propagate = False
    return logger


class Log:
    """Metric and timing helpers on top of the package logger."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts, sizes).
        Example: training done: 0.123s
        """
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Measure the execution time of a code block:
            with Log.time_block("training"):
                train()
        The duration is logged as a metric on exit and kept on .elapsed
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.elapsed = 0.0
        self.start = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        if exc_type is None:
            Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
        else:
            logger.warning("%s failed after %.3fs: %s", self.label, self.elapsed, exc)
        return False
