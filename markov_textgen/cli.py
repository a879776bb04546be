"""
cli.py - command line front end for the text generator
Features:
- Trains a LanguageModel from a corpus file and prints generated text
- "fixed" mode for reproducible output, "random" mode for a fresh run each time
- Optional model dump as a Rich table
- Run timings go to the log file through Log.time_block

Usage:
    markov-textgen WIN_LENGTH SEED_TEXT LENGTH {random,fixed} CORPUS
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.markup import escape
from rich.text import Text
from rich import box

from markov_textgen.core.language_model import LanguageModel
from markov_textgen.core.random_source import MODES, make_source
from markov_textgen.utils.config_manager import Config
from markov_textgen.utils.logger_utils import Log

# generated text goes to stdout, everything else to stderr
console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="markov-textgen",
        description="Generate text from a character-level Markov model trained on a corpus.",
    )
    p.add_argument("win_length", type=int, help="window length (model order)")
    p.add_argument("seed_text", help="initial text to extend")
    p.add_argument("length", type=int, help="number of characters to generate")
    p.add_argument("mode", choices=MODES, help="fixed = reproducible, random = new text each run")
    p.add_argument("corpus", help="path to the training text file")
    p.add_argument("--config", default="markov_textgen.json", help="JSON config file")
    p.add_argument("--show-model", action="store_true", help="print the learned model table")
    p.add_argument("--verbose", "-v", action="store_true", help="log progress to stderr")
    return p


def render_model(model: LanguageModel) -> Table:
    """Rich table with one row per window and its successor distribution."""
    table = Table(title=f"Language model (window={model.win_length})", box=box.SIMPLE)
    table.add_column("Window", style="cyan")
    table.add_column("Successors (chr count p cp)", style="white")
    for window in model.windows():
        table.add_row(Text(repr(window)), Text(str(model.distribution(window))))
    return table


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = Config(args.config)
        rng = make_source(args.mode, cfg.get("fixed_seed"))
        model = LanguageModel(args.win_length, rng=rng)
    except ValueError as e:
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return 2

    log = Log(cfg.get("log_path"), echo=args.verbose)
    log.info(f"window={args.win_length} mode={args.mode} corpus={args.corpus}")

    try:
        with log.time_block("train"):
            model.train_file(args.corpus, encoding=cfg.get("encoding"))
    except (OSError, UnicodeDecodeError) as e:
        log.error(f"cannot read corpus: {e}")
        console.print(f"[red]error:[/red] cannot read corpus {escape(args.corpus)}: {escape(str(e))}")
        return 1

    stats = model.stats()
    log.metric("windows", stats["windows"])

    if args.show_model or cfg.get("show_model"):
        console.print(render_model(model))

    try:
        with log.time_block("generate"):
            text = model.generate(args.seed_text, args.length)
    except ValueError as e:
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return 2

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
