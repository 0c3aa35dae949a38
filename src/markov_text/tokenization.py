from __future__ import annotations

from typing import Iterable


def whitespace_tokenize(text: str) -> list[str]:
    """Split on runs of whitespace. Punctuation and casing stay on the token."""

    return text.split()


def ngrams(tokens: Iterable[str], n: int) -> list[tuple[str, ...]]:
    if n <= 0:
        raise ValueError("n must be >= 1")
    toks = list(tokens)
    return [tuple(toks[i : i + n]) for i in range(0, max(0, len(toks) - n + 1))]
