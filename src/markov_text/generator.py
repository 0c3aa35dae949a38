"""Random walks over a BigramIndex.

Both generation modes share `advance`: look up the current pair, pick one
successor uniformly from its (duplicate-preserving) tuple, and shift the
pair forward by one word.
"""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

import numpy as np

from .errors import (
    EmptyIndexError,
    InvalidCountError,
    NoSentenceStartersError,
    NoSuccessorsError,
    SentenceTooLongError,
)
from .index import Bigram, BigramIndex

logger = logging.getLogger(__name__)

T = TypeVar("T")

SENTENCE_ENDINGS = (".", "?", "!")
SENTENCE_SEPARATOR = "\n\n"


def _choose(rng: np.random.Generator, items: Sequence[T]) -> T:
    return items[int(rng.integers(len(items)))]


def _check_max_words(max_words: int | None) -> None:
    if max_words is not None and max_words < 3:
        raise ValueError(f"max_words must be >= 3, got {max_words}")


def ends_sentence(word: str) -> bool:
    return word.endswith(SENTENCE_ENDINGS)


def advance(
    index: BigramIndex, key: Bigram, rng: np.random.Generator
) -> tuple[Bigram, str]:
    """Step the walk once; return the next key and the word just chosen."""

    nexts = index.get(key)
    if not nexts:
        raise NoSuccessorsError()
    nxt = _choose(rng, nexts)
    return (key[1], nxt), nxt


def generate_words(
    index: BigramIndex, count: int, *, rng: np.random.Generator | None = None
) -> str:
    """Generate exactly `count` space-separated words starting from a random bigram."""

    if count < 2:
        raise InvalidCountError(count, 2)
    if not len(index):
        raise EmptyIndexError()

    rng = rng if rng is not None else np.random.default_rng()
    key = _choose(rng, index.keys())
    words = list(key)

    for _ in range(count - 2):
        key, nxt = advance(index, key, rng)
        words.append(nxt)

    return " ".join(words)


def generate_sentence(
    index: BigramIndex,
    *,
    rng: np.random.Generator | None = None,
    max_words: int | None = None,
) -> str:
    """
    Generate one sentence.

    Starts from a bigram whose first word is capitalized and walks until a
    word ends in '.', '?' or '!'. Without `max_words` there is no length
    bound: a corpus whose reachable cycles never hit terminal punctuation
    keeps the loop running.
    """

    _check_max_words(max_words)
    if not len(index):
        raise EmptyIndexError()
    starters = index.sentence_starters()
    if not starters:
        raise NoSentenceStartersError()

    rng = rng if rng is not None else np.random.default_rng()
    key = _choose(rng, starters)
    words = list(key)

    while True:
        if max_words is not None and len(words) >= max_words:
            logger.debug(f"Giving up on sentence after {len(words)} words")
            raise SentenceTooLongError(max_words)
        key, nxt = advance(index, key, rng)
        words.append(nxt)
        if ends_sentence(nxt):
            break

    return " ".join(words)


def generate_sentences(
    index: BigramIndex,
    count: int,
    *,
    rng: np.random.Generator | None = None,
    max_words: int | None = None,
) -> str:
    if count < 1:
        raise InvalidCountError(count, 1)
    _check_max_words(max_words)

    rng = rng if rng is not None else np.random.default_rng()
    sentences = [
        generate_sentence(index, rng=rng, max_words=max_words) for _ in range(count)
    ]
    return SENTENCE_SEPARATOR.join(sentences)
