from __future__ import annotations

import logging

from .chain import build_chain, chain_summary
from .config import MarkovConfig
from .generation import RandomSource, generate, make_rng
from .text_cleaning import normalize_corpus
from .tokenization import tokenize

logger = logging.getLogger(__name__)


def run_pipeline(text: str, config: MarkovConfig | None = None, rng: RandomSource | None = None) -> str:
    """Tokenize a corpus, build its chain and walk it once."""

    cfg = (config or MarkovConfig()).validate()

    if cfg.normalize:
        text = normalize_corpus(text)

    tokens = tokenize(text)
    db = build_chain(tokens, cfg.prefix_length)

    summary = chain_summary(db)
    logger.info(
        "Chain has %d prefixes and %d transitions (max %d successors per prefix)",
        summary.prefixes,
        summary.transitions,
        summary.max_successors,
    )

    return generate(db, cfg.num_iterations, rng if rng is not None else make_rng(cfg.seed))
