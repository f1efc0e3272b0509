from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Mapping, Sequence

from .tokenization import join_tokens

logger = logging.getLogger(__name__)


class ChainDatabase(dict):
    """Mapping of joined prefix to the successor tokens seen after it.

    Successor lists keep corpus order and duplicates, so drawing a position
    uniformly reproduces the empirical frequencies.
    """

    def __init__(self, prefix_length: int, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.prefix_length = prefix_length

    def __repr__(self) -> str:
        return f"ChainDatabase(prefix_length={self.prefix_length}, {dict.__repr__(self)})"


@dataclass(frozen=True)
class ChainSummary:
    """Size and successor counts of a chain database."""

    prefixes: int
    transitions: int
    max_successors: int
    mean_successors: float


def _check_prefix_length(prefix_length: int) -> None:
    if isinstance(prefix_length, bool) or not isinstance(prefix_length, int):
        raise ValueError(f"prefix_length must be an int, got {type(prefix_length).__name__}")
    if prefix_length < 0:
        raise ValueError("prefix_length must be >= 0")


def build_chain(tokens: Sequence[str], prefix_length: int) -> ChainDatabase:
    """Map every prefix of `prefix_length` tokens to the tokens that follow it.

    The window starts out filled with empty strings, so the first
    `prefix_length - 1` keys carry empty leading components.
    """

    _check_prefix_length(prefix_length)

    db = ChainDatabase(prefix_length)
    window: deque[str] = deque([""] * prefix_length, maxlen=prefix_length)

    for i, token in enumerate(tokens):
        window.append(token)
        if i + 1 < len(tokens):
            prefix = join_tokens(window)
            db.setdefault(prefix, []).append(tokens[i + 1])

    logger.debug(
        "Built chain: %d tokens, prefix length %d, %d prefixes",
        len(tokens),
        prefix_length,
        len(db),
    )
    return db


def chain_summary(db: Mapping[str, Sequence[str]]) -> ChainSummary:
    counts = [len(successors) for successors in db.values()]
    total = sum(counts)
    return ChainSummary(
        prefixes=len(counts),
        transitions=total,
        max_successors=max(counts, default=0),
        mean_successors=total / len(counts) if counts else 0.0,
    )
