from __future__ import annotations


class MarkovError(Exception):
    """Base class for every error raised by markov_text."""


class EmptyDatabaseError(MarkovError, ValueError):
    """The chain database has no prefixes to start a walk from."""


class MissingPrefixError(MarkovError, KeyError):
    def __init__(self, prefix: str):
        super().__init__(prefix)
        self.prefix = prefix

    def __str__(self) -> str:
        return f"prefix {self.prefix!r} has no successors in the chain database"


class OptionConversionError(MarkovError, ValueError):
    def __init__(self, name: str, reason: str):
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason
