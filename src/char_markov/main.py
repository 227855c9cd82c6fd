"""
Character Markov Text Generator

Command line entry point: train a character-level Markov model on a corpus
file and print randomly generated text.

Usage:
    python -m char_markov --corpus shakespeare.txt --window 7 --length 500
    python -m char_markov --corpus reviews.csv --csv-column text --clean
    python -m char_markov --config settings.json --seed 42 --dump
"""

import argparse
import itertools
import logging
from pathlib import Path
from typing import Iterable, Optional

from .config import Config
from .datasets import iter_chars, load_corpus_text, load_csv_corpus
from .language_model import LanguageModel
from .text_cleaning import clean_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate text from a character-level Markov model"
    )

    parser.add_argument("--corpus", type=str, help="Training corpus (text or CSV file)")
    parser.add_argument("--window", "-w", type=int, help="Window length (characters of context)")
    parser.add_argument("--seed", "-s", type=int, help="Random seed for reproducible output")
    parser.add_argument("--initial", "-i", type=str, help="Initial text to continue")
    parser.add_argument("--length", "-n", type=int, help="Number of characters to generate")
    parser.add_argument("--csv-column", type=str, help="Read the corpus from this CSV column")
    parser.add_argument("--clean", action="store_true", help="Normalize the corpus before training")
    parser.add_argument("--dump", action="store_true", help="Print the transition table")
    parser.add_argument("--export", type=str, help="Write the transition table to a CSV file")
    parser.add_argument("--output", "-o", type=str, help="Write generated text to a file")
    parser.add_argument("--config", "-c", type=str, help="Path to configuration JSON file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Merge JSON config (if any) with command line overrides."""
    if args.config and Path(args.config).exists():
        config_dict = Config.from_json(args.config).to_dict()
    else:
        config_dict = Config().to_dict()

    overrides = {
        "corpus_path": args.corpus,
        "window_length": args.window,
        "seed": args.seed,
        "initial_text": args.initial,
        "target_length": args.length,
        "csv_column": args.csv_column,
        "output_path": args.output,
    }
    config_dict.update({k: v for k, v in overrides.items() if v is not None})
    if args.clean:
        config_dict["clean"] = True

    return Config.from_dict(config_dict)


def corpus_stream(config: Config) -> Iterable[str]:
    """Characters to train on, read lazily when no preprocessing is needed."""
    if config.csv_column:
        text = load_csv_corpus(config.corpus_path, config.csv_column, config.encoding)
    elif config.clean:
        text = load_corpus_text(config.corpus_path, config.encoding)
    else:
        return iter_chars(config.corpus_path, config.encoding)

    return clean_text(text) if config.clean else text


def run(config: Config, dump: bool = False, export: Optional[str] = None) -> str:
    """Train on the configured corpus and return generated text."""
    model = LanguageModel(config.window_length, seed=config.seed)
    model.train(corpus_stream(config))

    if dump:
        print(model)

    if export:
        model.to_frame().to_csv(export, index=False)
        logger.info(f"Transition table written to {export}")

    initial_text = config.initial_text
    if initial_text is None:
        initial_text = "".join(itertools.islice(corpus_stream(config), config.window_length))

    text = model.generate(initial_text, config.target_length)
    if len(text) < config.target_length + config.window_length:
        logger.info(f"Generation stopped early after {len(text)} characters")

    return text


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = load_config(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    if not config.corpus_path:
        logger.error("No corpus given; use --corpus or set corpus_path in the config file")
        return 1

    try:
        text = run(config, dump=args.dump, export=args.export)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Training failed: {e}")
        return 1

    if config.output_path:
        Path(config.output_path).write_text(text, encoding=config.encoding)
        logger.info(f"Generated text written to {config.output_path}")
    else:
        print(text)

    return 0
