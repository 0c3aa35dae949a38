"""Generation settings shared by the library and the command line."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, Optional

import numpy as np


@dataclass(frozen=True)
class GenerationConfig:
    """
    Settings for one generation run.

    Attributes:
        seed: Seed for the random generator; None draws fresh OS entropy
        max_sentence_words: Optional cap on words per sentence. None keeps
            the walk unbounded, which only stops at terminal punctuation
            or a dead-end bigram.
    """

    seed: Optional[int] = None
    max_sentence_words: Optional[int] = None

    def __post_init__(self):
        for name in ("seed", "max_sentence_words"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be a non-negative integer")
        if self.max_sentence_words is not None and self.max_sentence_words < 3:
            raise ValueError("max_sentence_words must be >= 3")

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "GenerationConfig":
        """Create a config from a dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    def to_dict(self) -> Dict:
        return asdict(self)


def load_config(path: str | Path) -> GenerationConfig:
    with open(path, "r", encoding="utf-8") as f:
        config_dict = json.load(f)
    if not isinstance(config_dict, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return GenerationConfig.from_dict(config_dict)
