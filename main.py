"""CLI entrypoint for the Letter Boxed solver."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict

from letterboxed.core.constants import DEFAULT_MAX_CHAIN_LENGTH, DEFAULT_MIN_WORD_LENGTH, DEFAULT_PUZZLE
from letterboxed.core.exceptions import LetterBoxedError
from letterboxed.engine.letterboxed import LetterBoxed, LetterBoxedConfig
from letterboxed.io.hint import HintClient
from letterboxed.utils.logger import configure_logging
from letterboxed.utils.pretty import print_hint, print_solutions, print_solve_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a Letter Boxed puzzle",
    )
    parser.add_argument(
        "--puzzle",
        type=str,
        default=DEFAULT_PUZZLE,
        help="Puzzle input in abc-def-ghi-jkl format",
    )
    parser.add_argument(
        "--dict",
        dest="dictionary",
        type=Path,
        default=Path("words.txt"),
        help="Path to newline-delimited text file of valid words",
    )
    parser.add_argument(
        "--len",
        dest="max_chain_length",
        type=int,
        default=DEFAULT_MAX_CHAIN_LENGTH,
        help="Maximum length, in words, of solutions",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=DEFAULT_MIN_WORD_LENGTH,
        help="Minimum number of letters per word",
    )
    parser.add_argument("--hint", action="store_true", help="Print a hint for the first solution")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Abort the search after this many seconds and print partial results",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used to explore starting words",
    )
    parser.add_argument("--limit", type=int, default=None, help="Print at most this many solutions")
    parser.add_argument("--stats", action="store_true", help="Print a search summary")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    if args.max_chain_length < 1:
        parser.error("--len must be at least 1")
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")

    config = LetterBoxedConfig(
        puzzle=args.puzzle,
        dictionary_path=args.dictionary,
        max_chain_length=args.max_chain_length,
        min_word_length=args.min_length,
        timeout_seconds=args.timeout,
        max_workers=args.workers,
    )

    print("solving puzzle", args.puzzle)
    try:
        letter_boxed = LetterBoxed(config)
        print(len(letter_boxed.words), "valid words found")
        result = letter_boxed.solve()

        if args.hint:
            if not result.solutions:
                parser.exit(1, "no solutions found, nothing to hint\n")
            hint = HintClient().lookup(result.solutions[0].words[0])
            print_hint(hint)
        else:
            print_solutions(result.solutions, limit=args.limit)
    except LetterBoxedError as exc:
        parser.exit(2, f"error: {exc}\n")

    if args.stats:
        print_solve_stats(result, letter_boxed.puzzle)

    if args.output:
        payload: Dict[str, Any] = {
            "puzzle": str(letter_boxed.puzzle),
            "max_chain_length": result.max_chain_length,
            "word_count": result.word_count,
            "timed_out": result.timed_out,
            "solutions": [list(solution.words) for solution in result.solutions],
        }
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")


if __name__ == "__main__":  # pragma: no cover
    main()
