from __future__ import annotations

from typing import Iterable


PUNCTUATION = ",;:.!?"


def is_punctuation(token: str) -> bool:
    return len(token) == 1 and token in PUNCTUATION


def tokenize(text: str) -> list[str]:
    """Split text into words and punctuation tokens.

    Only the last character of a whitespace-delimited word is inspected, so
    "3:16" stays whole and "end.." becomes "end." and ".".
    """

    tokens: list[str] = []
    for raw in text.split():
        if len(raw) > 1 and raw[-1] in PUNCTUATION:
            tokens.append(raw[:-1])
            tokens.append(raw[-1])
        else:
            tokens.append(raw)
    return tokens


def split_prefix(prefix: str) -> list[str]:
    """Recover the tokens of a joined prefix key."""

    return tokenize(prefix)


def join_tokens(tokens: Iterable[str]) -> str:
    """Join tokens with single spaces, without a space before punctuation."""

    parts: list[str] = []
    for i, token in enumerate(tokens):
        if not is_punctuation(token) and i > 0:
            parts.append(" ")
        parts.append(token)
    return "".join(parts)
