from __future__ import annotations

import logging
from pathlib import Path

from .errors import CorpusReadError

logger = logging.getLogger(__name__)


def read_corpus(path: str | Path) -> str:
    """Read the whole corpus file as UTF-8 text."""

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Failed to read corpus {path}: {e}")
        raise CorpusReadError(str(path), e) from e

    logger.info(f"Read {len(text)} characters from {path}")
    return text
