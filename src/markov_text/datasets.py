from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


def load_corpus(path: str | Path, encoding: str = "utf-8") -> str:
    text = Path(path).read_text(encoding=encoding)
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def load_corpus_csv(path: str | Path, column: str = "text") -> str:
    """Concatenate one text column of a CSV file into a single corpus."""

    df = pd.read_csv(path)
    if column not in df.columns:
        raise ValueError(f"CSV must have a {column!r} column")
    rows = df[column].dropna().astype(str).tolist()
    logger.debug("Read %d rows of %r from %s", len(rows), column, path)
    return " ".join(rows)


def read_corpus(path: str | Path, column: str = "text") -> str:
    if Path(path).suffix.lower() == ".csv":
        return load_corpus_csv(path, column=column)
    return load_corpus(path)
