"""
Command-line entry point.

Usage:
    markov-text CORPUS [--prefix-length N] [--iterations N] [--seed N]
                [--config FILE] [--column NAME] [--normalize] [--verbose]

Value-less flags go after CORPUS, otherwise CORPUS is read as their value.
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import Optional, Sequence

from .config import MarkovConfig, load_config
from .datasets import read_corpus
from .errors import MarkovError, OptionConversionError
from .options import ProgramOptions
from .pipeline import run_pipeline

logger = logging.getLogger(__name__)

USAGE = __doc__.strip()

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_config(options: ProgramOptions) -> MarkovConfig:
    """Layer command-line values over the JSON config over defaults."""

    if options.has("--config"):
        config = load_config(options.get("--config"))
    else:
        config = MarkovConfig()

    return dataclasses.replace(
        config,
        prefix_length=options.get_or_default("--prefix-length", config.prefix_length, int),
        num_iterations=options.get_or_default("--iterations", config.num_iterations, int),
        seed=options.get_or_default("--seed", config.seed, int),
        csv_column=options.get_or_default("--column", config.csv_column),
        normalize=config.normalize or options.has("--normalize"),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    options = ProgramOptions(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.DEBUG if options.has("--verbose") else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if options.has("--help"):
        print(USAGE)
        return EXIT_OK

    positional = options.positional
    if len(positional) != 1:
        logger.error("Expected exactly one corpus path, got %d", len(positional))
        print(USAGE, file=sys.stderr)
        return EXIT_USAGE

    try:
        config = build_config(options).validate()
    except OptionConversionError as exc:
        logger.error("Invalid option %s", exc)
        return EXIT_USAGE
    except (OSError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_FAILURE

    try:
        text = read_corpus(positional[0], column=config.csv_column)
        output = run_pipeline(text, config)
    except OSError as exc:
        logger.error("Unable to read corpus %s: %s", positional[0], exc)
        return EXIT_FAILURE
    except (MarkovError, ValueError) as exc:
        logger.error("Generation failed: %s", exc)
        return EXIT_FAILURE

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
