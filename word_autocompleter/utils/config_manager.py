# config_manager.py - JSON config manager

import json
import logging
import os

from rich.console import Console
from rich.table import Table
from rich import box

from word_autocompleter.core.simple_model import MAX_PREDICTIONS

logger = logging.getLogger(__name__)

DEFAULTS = {
    "corpus_path": "big.txt",
    "unigram_path": os.path.join("data", "unigram.csv"),
    "bigram_path": os.path.join("data", "bigram.csv"),
    "autosave": False,
    "max_suggestions": MAX_PREDICTIONS,  # display limit, never above MAX_PREDICTIONS
    "log_level": "INFO",
    "show_timing": False,
}


class Config:
    def __init__(self, path="config.json", create=True):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load(create)

    def _load(self, create):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("could not read config %s (%s), using defaults", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("config %s is not a JSON object, using defaults", self.path)
                return
            self.data.update(loaded)
        elif create:
            self.save()

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    @property
    def max_suggestions(self) -> int:
        try:
            n = int(self.data.get("max_suggestions", MAX_PREDICTIONS))
        except (TypeError, ValueError):
            return MAX_PREDICTIONS
        return max(1, min(n, MAX_PREDICTIONS))

    def show(self, console=None):
        console = console or Console()
        table = Table(title="Config", box=box.SIMPLE)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for k, v in self.data.items():
            table.add_row(k, str(v))
        console.print(table)

    def set(self, key, val):
        """Set an option, coercing `val` to the type of its default. Unknown keys raise KeyError."""
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        else:
            val = kind(val)
        self.data[key] = val
        self.save()
        return val
