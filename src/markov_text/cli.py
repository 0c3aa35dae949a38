"""
Command-line entry point.

Usage:
    markov-text corpus.txt --sentences 3
    markov-text corpus.txt --words 50 --seed 7
    markov-text corpus.txt -s 2 --config settings.json -v

Generated text (or an ``Error: ...`` line) goes to stdout; logs go to stderr.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import GenerationConfig, load_config
from .corpus import read_corpus
from .errors import CorpusReadError, MarkovTextError
from .generator import generate_sentences, generate_words
from .index import build_index

logger = logging.getLogger(__name__)

USAGE_MESSAGE = "You must pass an argument for either --sentences or --words"


def setup_logging(level=logging.WARNING):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _count(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative: {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markov-text",
        description="Generates random text using a Markov chain"
    )

    parser.add_argument(
        "corpus",
        metavar="CORPUS",
        help="Sets the text corpus to use"
    )

    parser.add_argument(
        "--sentences", "-s",
        type=_count,
        default=0,
        help="Sets how many sentences to generate"
    )

    parser.add_argument(
        "--words", "-w",
        type=_count,
        default=0,
        help="Sets how many words to generate"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random generator for reproducible output"
    )

    parser.add_argument(
        "--max-sentence-words",
        type=int,
        default=None,
        help="Fail a sentence that reaches this many words without ending"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def resolve_config(args: argparse.Namespace) -> GenerationConfig:
    """Merge the optional JSON config with explicit command-line flags."""
    if args.config and Path(args.config).exists():
        config_dict = load_config(args.config).to_dict()
    else:
        if args.config:
            logger.warning(f"Config file not found: {args.config}")
        config_dict = {}

    if args.seed is not None:
        config_dict["seed"] = args.seed
    if args.max_sentence_words is not None:
        config_dict["max_sentence_words"] = args.max_sentence_words

    return GenerationConfig.from_dict(config_dict)


def run(args: argparse.Namespace) -> None:
    if args.sentences == 0 and args.words == 0:
        print(USAGE_MESSAGE)
        return
    if args.sentences > 0 and args.words > 0:
        logger.warning("Both --sentences and --words given; generating sentences")

    try:
        config = resolve_config(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return

    try:
        corpus = read_corpus(args.corpus)
    except CorpusReadError as e:
        print(f'Error reading corpus file "{e.path}": {e}')
        return

    index = build_index(corpus)
    logger.info(
        f"Built index with {len(index)} bigrams from {index.token_count} tokens"
    )
    rng = config.make_rng()

    try:
        if args.sentences > 0:
            text = generate_sentences(
                index, args.sentences, rng=rng, max_words=config.max_sentence_words
            )
        else:
            text = generate_words(index, args.words, rng=rng)
    except MarkovTextError as e:
        text = f"Error: {e}"

    print(text)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    run(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
