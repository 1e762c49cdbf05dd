"""Pretty-print helpers for solutions and hints."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from ..core.models import Solution
    from ..engine.puzzle import Puzzle
    from ..engine.solver import SolveResult
    from ..io.hint import WordHint


def format_solution(solution: Solution) -> str:
    return str(solution)


def format_puzzle(puzzle: Puzzle) -> str:
    """Render the four sides as a small box (top, left/right, bottom)."""

    top, right, bottom, left = ("".join(side).upper() for side in puzzle.sides)
    lines = ["   " + "  ".join(top)]
    for index in range(len(left)):
        lines.append(f"{left[index]}         {right[index]}")
    lines.append("   " + "  ".join(bottom))
    return "\n".join(lines)


def print_solutions(
    solutions: Iterable[Solution],
    *,
    limit: Optional[int] = None,
    stream=None,
) -> None:
    stream = stream or sys.stdout
    for index, solution in enumerate(solutions):
        if limit is not None and index >= limit:
            break
        print(format_solution(solution), file=stream)


def print_solve_stats(result: SolveResult, puzzle: Optional[Puzzle] = None, *, stream=None) -> None:
    """Print a summary of a completed search."""

    stream = stream or sys.stdout
    if puzzle is not None:
        print(format_puzzle(puzzle), file=stream)
        print(file=stream)

    lengths = Counter(len(solution) for solution in result.solutions)
    print("--- Search ---", file=stream)
    print(f"  Playable words: {result.word_count}", file=stream)
    print(f"  Max chain:      {result.max_chain_length} words", file=stream)
    print(f"  Solutions:      {len(result.solutions)}", file=stream)
    if lengths:
        dist_parts = [f"{length}:{count}" for length, count in sorted(lengths.items())]
        print(f"  Distribution:   {' '.join(dist_parts)}", file=stream)
    print(f"  Elapsed:        {result.elapsed_seconds:.3f}s", file=stream)
    if result.timed_out:
        print("  Deadline hit, results are partial", file=stream)


def print_hint(hint: WordHint, *, stream=None) -> None:
    stream = stream or sys.stdout
    print(f"Word: {hint.word}", file=stream)
    for meaning in hint.meanings:
        print(f"  - {meaning}", file=stream)
    if hint.synonyms:
        print(f"Synonyms: {', '.join(hint.synonyms)}", file=stream)
    if hint.usage_example:
        print(f"Example: {hint.usage_example}", file=stream)
