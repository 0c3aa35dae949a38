"""Text generation from a second-order (bigram -> next word) Markov chain.

Build an index once from a corpus, then walk it:

    index = build_index(text)
    generate_sentences(index, 3, rng=numpy.random.default_rng(0))
"""

from .config import GenerationConfig, load_config
from .corpus import read_corpus
from .errors import (
    CorpusReadError,
    EmptyIndexError,
    InvalidCountError,
    MarkovTextError,
    NoSentenceStartersError,
    NoSuccessorsError,
    SentenceTooLongError,
)
from .generator import advance, generate_sentence, generate_sentences, generate_words
from .index import BigramIndex, build_index

__version__ = "1.0.0"

__all__ = [
    "BigramIndex",
    "build_index",
    "advance",
    "generate_words",
    "generate_sentence",
    "generate_sentences",
    "GenerationConfig",
    "load_config",
    "read_corpus",
    "MarkovTextError",
    "CorpusReadError",
    "EmptyIndexError",
    "NoSentenceStartersError",
    "NoSuccessorsError",
    "SentenceTooLongError",
    "InvalidCountError",
]
