from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, Optional


@dataclass(frozen=True)
class MarkovConfig:
    """
    Settings for one generation run.

    Attributes:
        prefix_length: Number of tokens forming a prefix key
        num_iterations: Generation steps, the start prefix counts as one
        seed: Seed for the random source; None draws on OS entropy
        normalize: Whether to clean the corpus before tokenizing
        csv_column: Column holding the text when the corpus is a CSV file
    """

    prefix_length: int = 2
    num_iterations: int = 100
    seed: Optional[int] = None
    normalize: bool = False
    csv_column: str = "text"

    def validate(self) -> "MarkovConfig":
        for name in ("prefix_length", "num_iterations"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an int or null, got {self.seed!r}")
        if not isinstance(self.normalize, bool):
            raise ValueError(f"normalize must be true or false, got {self.normalize!r}")
        if not isinstance(self.csv_column, str):
            raise ValueError(f"csv_column must be a string, got {self.csv_column!r}")
        if self.prefix_length < 0:
            raise ValueError("prefix_length must be >= 0")
        if self.num_iterations < 1:
            raise ValueError("num_iterations must be >= 1")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "MarkovConfig":
        """Create a config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})

    def to_dict(self) -> Dict:
        return asdict(self)


def load_config(path: str | Path) -> MarkovConfig:
    with open(path, "r", encoding="utf-8") as f:
        config_dict = json.load(f)
    if not isinstance(config_dict, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return MarkovConfig.from_dict(config_dict)
