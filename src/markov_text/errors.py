"""Exceptions raised while reading a corpus or walking the chain."""

from __future__ import annotations


class MarkovTextError(Exception):
    """Base class for every error this package raises on purpose."""


class CorpusReadError(MarkovTextError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(str(cause))
        self.path = path
        self.cause = cause


class EmptyIndexError(MarkovTextError):
    def __init__(self, message: str = "No starting words could be found"):
        super().__init__(message)


class NoSentenceStartersError(MarkovTextError):
    def __init__(self, message: str = "No sentence starters could be found"):
        super().__init__(message)


class NoSuccessorsError(MarkovTextError):
    def __init__(self, message: str = "Couldn't generate next word from bigram"):
        super().__init__(message)


class SentenceTooLongError(NoSuccessorsError):
    """The walk hit the configured word limit before terminal punctuation."""

    def __init__(self, limit: int):
        super().__init__(f"Sentence exceeded {limit} words without ending")
        self.limit = limit


class InvalidCountError(MarkovTextError, ValueError):
    def __init__(self, count: int, minimum: int):
        super().__init__(f"count must be >= {minimum}, got {count}")
        self.count = count
        self.minimum = minimum
