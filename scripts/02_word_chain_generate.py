from __future__ import annotations

from markov_text.chain import build_chain, chain_summary
from markov_text.generation import generate, make_rng
from markov_text.tokenization import tokenize


def main() -> None:
    text = (
        "The cat sat on the mat. The dog sat on the log. "
        "The cat saw the dog, and the dog saw the cat! The cat"
    )

    db = build_chain(tokenize(text), prefix_length=2)
    print(chain_summary(db))
    for prefix, successors in list(db.items())[:6]:
        print(f"{prefix!r:>16} -> {successors}")

    print(generate(db, num_iterations=30, rng=make_rng(42)))


if __name__ == "__main__":
    main()
