from __future__ import annotations

from markov_text.text_cleaning import normalize_corpus
from markov_text.tokenization import join_tokens, split_prefix, tokenize


def main() -> None:
    raw = "In the beginning God created the heaven and the earth.\n\nAnd the earth was without form, and void;  see 1:2."
    cleaned = normalize_corpus(raw)
    tokens = tokenize(cleaned)

    print("RAW:", raw)
    print("CLEANED:", cleaned)
    print("TOKENS:", tokens)
    print("JOINED:", join_tokens(tokens))
    print("PREFIX TOKENS:", split_prefix(join_tokens(tokens[-3:])))


if __name__ == "__main__":
    main()
