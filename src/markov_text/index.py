"""Second-order bigram index over a whitespace-tokenized corpus."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import Iterator, Mapping

import regex  # type: ignore

from .tokenization import ngrams, whitespace_tokenize

logger = logging.getLogger(__name__)

Bigram = tuple[str, str]

# Unicode "Uppercase" property, not just Lu.
_UPPERCASE_RE = regex.compile(r"\p{Uppercase}")


def starts_uppercase(word: str) -> bool:
    return bool(word) and _UPPERCASE_RE.match(word[0]) is not None


@dataclass(frozen=True)
class BigramIndex:
    """Read-only map of (w1, w2) -> successors, duplicates kept.

    A successor seen N times after a pair appears N times in its tuple, so a
    uniform pick over the tuple is a frequency-weighted pick over words.
    """

    table: Mapping[Bigram, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    token_count: int = 0

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, key: object) -> bool:
        return key in self.table

    def __iter__(self) -> Iterator[Bigram]:
        return iter(self.table)

    def keys(self) -> list[Bigram]:
        return list(self.table)

    def successors(self, key: Bigram) -> tuple[str, ...]:
        return self.table[key]

    def get(self, key: Bigram) -> tuple[str, ...] | None:
        return self.table.get(key)

    @cached_property
    def _starters(self) -> tuple[Bigram, ...]:
        return tuple(key for key in self.table if starts_uppercase(key[0]))

    def sentence_starters(self) -> tuple[Bigram, ...]:
        """Keys whose first word begins with an uppercase character.

        Computed on first use and reused afterwards; the table never changes.
        """

        return self._starters

    def as_dict(self) -> dict[Bigram, list[str]]:
        return {key: list(words) for key, words in self.table.items()}


def build_index(corpus: str) -> BigramIndex:
    tokens = whitespace_tokenize(corpus)

    building: dict[Bigram, list[str]] = {}
    for w1, w2, w3 in ngrams(tokens, 3):
        building.setdefault((w1, w2), []).append(w3)

    table = MappingProxyType({key: tuple(words) for key, words in building.items()})
    logger.debug(f"Indexed {len(tokens)} tokens into {len(table)} bigrams")
    return BigramIndex(table=table, token_count=len(tokens))
