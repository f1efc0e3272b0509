from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

import regex  # type: ignore


_WHITESPACE_RE = re.compile(r"\s+")
_URL_RE = re.compile(r"https?://\S+|www\.\S+")


@dataclass(frozen=True)
class NormalizeConfig:
    lowercase: bool = False
    strip_accents: bool = False
    remove_urls: bool = True
    remove_control_chars: bool = True
    collapse_whitespace: bool = True


def normalize_corpus(text: str, config: NormalizeConfig | None = None) -> str:
    """Optional clean-up of a corpus before tokenization.

    Punctuation is left alone, the tokenizer depends on it.
    """

    cfg = config or NormalizeConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.remove_urls:
        s = _URL_RE.sub(" ", s)

    if cfg.strip_accents:
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    if cfg.remove_control_chars:
        # Cc minus whitespace; newlines are ordinary separators here.
        s = regex.sub(r"[^\P{Cc}\s]", " ", s)

    if cfg.collapse_whitespace:
        s = _WHITESPACE_RE.sub(" ", s).strip()

    return s
