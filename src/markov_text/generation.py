from __future__ import annotations

import logging
from collections import deque
from typing import Mapping, Optional, Protocol, Sequence

import numpy as np

from .errors import EmptyDatabaseError, MissingPrefixError
from .tokenization import is_punctuation, join_tokens, split_prefix

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that draws a uniform integer in [0, high), such as numpy's Generator."""

    def integers(self, high: int) -> int: ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a numpy generator; without a seed it draws on OS entropy."""

    return np.random.default_rng(seed)


def _pick(rng: RandomSource, items: Sequence[str]) -> str:
    return items[int(rng.integers(len(items)))]


def next_prefix(prefix: str, word: str, prefix_length: Optional[int] = None) -> str:
    """Slide a prefix key one token forward.

    With a known prefix length the split tokens are first padded back to full
    width with the empty placeholders the builder starts its window with.
    """

    tokens = split_prefix(prefix)
    if prefix_length is None:
        window = tokens[1:]
        window.append(word)
        return join_tokens(window)

    padded = deque([""] * (prefix_length - len(tokens)) + tokens, maxlen=prefix_length)
    padded.append(word)
    return join_tokens(padded)


def generate(
    db: Mapping[str, Sequence[str]],
    num_iterations: int,
    rng: Optional[RandomSource] = None,
) -> str:
    """Random walk over the chain database.

    The start prefix is drawn uniformly over distinct prefixes and emitted
    verbatim; each further iteration emits one successor token.
    """

    if not db:
        raise EmptyDatabaseError("cannot generate text from an empty chain database")
    if isinstance(num_iterations, bool) or not isinstance(num_iterations, int):
        raise ValueError(f"num_iterations must be an int, got {type(num_iterations).__name__}")
    if num_iterations < 1:
        raise ValueError("num_iterations must be >= 1")

    rng = rng if rng is not None else make_rng()
    prefix_length = getattr(db, "prefix_length", None)

    # Sorted so a seeded walk does not depend on insertion order.
    prefix = _pick(rng, sorted(db))
    output = [prefix]

    for _ in range(num_iterations - 1):
        successors = db.get(prefix)
        if not successors:
            raise MissingPrefixError(prefix)

        word = _pick(rng, successors)

        prefix = next_prefix(prefix, word, prefix_length)

        if not is_punctuation(word):
            output.append(" ")
        output.append(word)

    logger.debug("Generated %d iterations", num_iterations)
    return "".join(output)
