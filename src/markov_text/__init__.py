"""Prefix-based Markov chain text generation.

Tokenize a corpus, map each fixed-length prefix to the words seen after it,
then random-walk that map to produce new text.
"""

from .chain import ChainDatabase, build_chain, chain_summary
from .errors import EmptyDatabaseError, MarkovError, MissingPrefixError, OptionConversionError
from .generation import generate, make_rng
from .tokenization import is_punctuation, join_tokens, split_prefix, tokenize

__version__ = "0.1.0"

__all__ = [
    "ChainDatabase",
    "EmptyDatabaseError",
    "MarkovError",
    "MissingPrefixError",
    "OptionConversionError",
    "build_chain",
    "chain_summary",
    "generate",
    "is_punctuation",
    "join_tokens",
    "make_rng",
    "split_prefix",
    "tokenize",
]
