"""
cli.py - interactive word completion
Features:
- Trains the unigram and bigram indexes from a corpus file (or loads saved ones)
- Type a word fragment to see completions, or "previous fragment" to complete
  with the previous word as context
- Saves/loads the trained indexes in the text record format
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import time
from typing import List, Optional, Tuple

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.prompt import Prompt
from rich.markup import escape
from rich import box

from word_autocompleter.context.normalizer import clean_line
from word_autocompleter.context.tokenizer import simple_tokenize
from word_autocompleter.core.bigram_model import BigramIndex, BigramTrainer
from word_autocompleter.core.errors import AutocompleteError
from word_autocompleter.core.prediction_entry import PredictionEntry
from word_autocompleter.core.simple_model import FrequencyIndex, FrequencyTrainer
from word_autocompleter.utils import model_store
from word_autocompleter.utils.config_manager import Config
from word_autocompleter.utils.logger_utils import Log, setup_logging

HELP = (
    "Type a fragment to complete it, or two words to complete the second after the first.\n"
    "Commands: /train <file> /save /load /config [key val] /stats /help /quit"
)


class ModelNotReadyError(AutocompleteError):
    """Raised when a prediction is requested before any model was trained or loaded."""


class CLI:
    """Command-line interface: owns the trained indexes and the read-predict-print loop."""

    def __init__(self, config: Optional[Config] = None, console: Optional[Console] = None):
        self.cfg = config or Config()
        self.console = console or Console()
        self.unigram: Optional[FrequencyIndex] = None
        self.bigram: Optional[BigramIndex] = None
        self.stats = {"lines_trained": 0, "predictions": 0, "predict_time": 0.0}
        self.running = True

    # TRAINING/PERSISTENCE -----------------------------------------------------------
    def train_corpus(self, path: str) -> int:
        """
        Train fresh unigram and bigram models on every line of `path`.
        Each line is cleaned to [a-z ] before tokenizing. The bigram trainer
        carries the last word of a line over to the next one.
        Returns the number of lines read.
        """
        unigram = FrequencyTrainer()
        bigram = BigramTrainer()
        n = 0
        with Log.time_block("training"):
            for line in model_store.read_corpus(path):
                tokens = simple_tokenize(clean_line(line))
                unigram.train(tokens)
                bigram.train(tokens)
                n += 1
        with Log.time_block("finalizing"):
            self.unigram = unigram.finalize()
            self.bigram = bigram.finalize()
        self.stats["lines_trained"] += n
        return n

    def save_models(self) -> None:
        unigram, bigram = self._require_models()
        model_store.save_unigram(unigram, self.cfg.get("unigram_path"))
        model_store.save_bigram(bigram, self.cfg.get("bigram_path"))

    def load_models(self) -> None:
        with Log.time_block("loading"):
            unigram = model_store.load_unigram(self.cfg.get("unigram_path"))
            bigram = model_store.load_bigram(self.cfg.get("bigram_path"))
        self.unigram, self.bigram = unigram, bigram

    def _require_models(self) -> Tuple[FrequencyIndex, BigramIndex]:
        if self.unigram is None or self.bigram is None:
            raise ModelNotReadyError("no model yet, use /train <file> or /load")
        return self.unigram, self.bigram

    # PREDICTION ---------------------------------------------------------------
    def predict(self, text: str) -> Tuple[List[PredictionEntry], str]:
        """
        Complete the last fragment of `text`.
        With a previous word the bigram index is asked first, falling back to
        the unigram index when it has nothing. Returns (entries, source).
        """
        unigram, bigram = self._require_models()
        tokens = simple_tokenize(clean_line(text))
        if not tokens:
            return [], ""

        t0 = time.perf_counter()
        prefix = tokens[-1]
        out: List[PredictionEntry] = []
        source = "unigram"
        if len(tokens) >= 2:
            out = bigram.predict(tokens[-2], prefix)
            source = "bigram"
        if not out:
            out = unigram.predict(prefix)
            source = "unigram"
        self.stats["predictions"] += 1
        self.stats["predict_time"] += time.perf_counter() - t0
        return out, source

    # MAIN LOOP ---------------------------------------------------------------
    def run(self):
        """
        Main interactive loop:
        - prompts for input
        - dispatches /commands
        - otherwise renders the predictions for the input
        """
        self.console.rule("[bold magenta]Word Autocompleter[/bold magenta]")
        self.console.print(f"[cyan]{escape(HELP)}[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Input[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle_line(line)

    def handle_line(self, line: str) -> None:
        """Process one line of user input. Model and file errors are reported, not raised."""
        line = line.strip()
        if not line:
            return
        try:
            if line.startswith("/"):
                self._handle_command(line)
                return
            entries, source = self.predict(line)
            self._display_predictions(entries, source)
        except (AutocompleteError, OSError) as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, line: str):
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Bad command:[/red] {e}")
            return
        cmd = parts[0].lower()

        if cmd in ("/q", "/quit", "/exit"):
            self._exit()
            return

        if cmd == "/help":
            self.console.print(escape(HELP))
            return

        if cmd == "/train":
            path = parts[1] if len(parts) > 1 else self.cfg.get("corpus_path")
            n = self.train_corpus(path)
            self.console.print(f"[green]Trained on {n} lines.[/green]")
            if self.cfg.get("autosave"):
                self.save_models()
            return

        if cmd == "/save":
            self.save_models()
            self.console.print("[green]Models saved.[/green]")
            return

        if cmd == "/load":
            self.load_models()
            self.console.print("[green]Models loaded.[/green]")
            return

        if cmd == "/config":
            self._config_command(parts[1:])
            return

        if cmd == "/stats":
            self._show_stats()
            return

        self.console.print(f"[red]Unknown command:[/red] {cmd}")

    def _config_command(self, args: List[str]):
        if not args:
            self.cfg.show(self.console)
        elif len(args) == 2:
            try:
                val = self.cfg.set(args[0], args[1])
            except KeyError:
                self.console.print(f"[red]No such option:[/red] {args[0]}")
                return
            except ValueError:
                self.console.print(f"[red]Bad value for {args[0]}:[/red] {args[1]}")
                return
            self.console.print(f"{args[0]} = {val}")
        else:
            self.console.print("usage: /config [key val]")

    # DISPLAY -------------------------------------------------------------------------------
    def _display_predictions(self, entries: List[PredictionEntry], source: str):
        """Render (score, word) rows, best first."""
        if not entries:
            self.console.print("[dim](no predictions)[/dim]")
            return
        table = Table(title=f"Predictions ({source})", box=box.SIMPLE, show_edge=False, min_width=40)
        table.add_column("Score", justify="right", style="magenta")
        table.add_column("Word", style="bold")
        for entry in entries[: self.cfg.max_suggestions]:
            score, word = entry.as_row()
            table.add_row(str(score), word)
        self.console.print(table)

    def _show_stats(self):
        t = Table(title="Stats", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        t.add_row("Lines trained", str(self.stats["lines_trained"]))
        t.add_row("Vocabulary", str(len(self.unigram)) if self.unigram is not None else "-")
        t.add_row("Context words", str(len(self.bigram)) if self.bigram is not None else "-")
        t.add_row("Predictions", str(self.stats["predictions"]))
        if self.stats["predictions"]:
            avg_ms = 1000 * self.stats["predict_time"] / self.stats["predictions"]
            t.add_row("Avg predict", f"{avg_ms:.3f} ms")
        self.console.print(t)

    # EXIT ------------------------------------------------------------------------
    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="word-autocompleter", description="Frequency based word completion")
    p.add_argument("--corpus", help="training corpus (default: corpus_path from config)")
    p.add_argument("--config", default="config.json", help="JSON config file")
    p.add_argument("--load", action="store_true", help="load saved models instead of training")
    p.add_argument("--save", action="store_true", help="save the models after training")
    p.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    p.add_argument("--log-file", help="also write logs to this file")
    return p


def main(argv=None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    console = console or Console()
    setup_logging(args.log_level or cfg.get("log_level", "INFO"), args.log_file, console=console)

    cli = CLI(cfg, console=console)
    try:
        if args.load:
            cli.load_models()
        else:
            n = cli.train_corpus(args.corpus or cfg.get("corpus_path"))
            console.print(f"[dim]Trained on {n} lines.[/dim]")
            if args.save:
                cli.save_models()
    except (AutocompleteError, OSError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1

    cli.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
