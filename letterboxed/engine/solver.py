"""Bounded depth-first search over the puzzle graph."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from itertools import product
from typing import List, Optional, Tuple

from ..core.constants import DEFAULT_MAX_CHAIN_LENGTH
from ..core.models import Solution
from ..utils.logger import get_logger
from .graph import PuzzleGraph

LOGGER = get_logger(__name__)

# A search path holds one group of interchangeable words per chain position.
SearchPath = Tuple[Tuple[str, ...], ...]
Seed = Tuple[str, str, int, Tuple[str, ...]]


@dataclass
class SolverConfig:
    max_chain_length: int = DEFAULT_MAX_CHAIN_LENGTH
    timeout_seconds: Optional[float] = None
    max_workers: int = 1

    def __post_init__(self) -> None:
        if self.max_chain_length < 1:
            raise ValueError(f"max_chain_length must be >= 1, got {self.max_chain_length}")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")


@dataclass
class SolveResult:
    solutions: List[Solution]
    word_count: int
    max_chain_length: int
    elapsed_seconds: float = 0.0
    timed_out: bool = False
    paths_explored: int = field(default=0, repr=False)

    def shortest(self) -> List[Solution]:
        if not self.solutions:
            return []
        best = min(len(solution) for solution in self.solutions)
        return [solution for solution in self.solutions if len(solution) == best]

    def __len__(self) -> int:
        return len(self.solutions)


class _SearchState:
    """Deadline bookkeeping shared by every branch of one solve call."""

    def __init__(self, deadline: Optional[float]) -> None:
        self.deadline = deadline
        self.expired = threading.Event()

    def out_of_time(self) -> bool:
        if self.expired.is_set():
            return True
        if self.deadline is not None and time.perf_counter() > self.deadline:
            self.expired.set()
            return True
        return False


class Solver:
    """Enumerate every word chain that covers all twelve letters.

    A branch stops as soon as it covers the full alphabet, so solutions never
    carry a trailing word that adds nothing. Within ``max_chain_length`` the
    search is exhaustive, not shortest-first.
    """

    def __init__(self, graph: PuzzleGraph, config: Optional[SolverConfig] = None) -> None:
        self.graph = graph
        self.config = config or SolverConfig()
        self.full_mask = graph.puzzle.full_mask

    def solve(self) -> SolveResult:
        start = time.perf_counter()
        timeout = self.config.timeout_seconds
        state = _SearchState(start + timeout if timeout is not None else None)
        seeds = list(self.graph.signatures())

        paths: List[SearchPath] = []
        if self.config.max_workers > 1 and len(seeds) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                futures = [executor.submit(self._search_seed, seed, state) for seed in seeds]
                for future in as_completed(futures):
                    paths.extend(future.result())
        else:
            for seed in seeds:
                paths.extend(self._search_seed(seed, state))

        solutions = sorted(
            (Solution(words) for path in paths for words in product(*path)),
            key=lambda solution: (len(solution), solution.words),
        )
        elapsed = time.perf_counter() - start
        timed_out = state.expired.is_set()
        if timed_out:
            LOGGER.warning(
                "Search hit the %.2fs deadline; returning %d partial solutions",
                timeout,
                len(solutions),
            )
        LOGGER.info(
            "Found %d solutions (max %d words) from %d seeds in %.3fs",
            len(solutions),
            self.config.max_chain_length,
            len(seeds),
            elapsed,
        )
        return SolveResult(
            solutions=solutions,
            word_count=self.graph.word_count,
            max_chain_length=self.config.max_chain_length,
            elapsed_seconds=elapsed,
            timed_out=timed_out,
            paths_explored=len(paths),
        )

    def _search_seed(self, seed: Seed, state: _SearchState) -> List[SearchPath]:
        _first, last, mask, words = seed
        found: List[SearchPath] = []
        self._search((words,), mask, last, state, found)
        return found

    def _search(
        self,
        path: SearchPath,
        covered: int,
        last: str,
        state: _SearchState,
        found: List[SearchPath],
    ) -> None:
        if covered == self.full_mask:
            found.append(path)
            return
        if len(path) >= self.config.max_chain_length:
            return
        if state.out_of_time():
            return

        for next_last, by_mask in self.graph.edges_from(last).items():
            for mask, words in by_mask.items():
                extended = covered | mask
                if extended != covered:
                    self._search(path + (words,), extended, next_last, state, found)


def solve(graph: PuzzleGraph, max_chain_length: int = DEFAULT_MAX_CHAIN_LENGTH) -> List[Solution]:
    """Convenience wrapper returning only the solutions."""

    return Solver(graph, SolverConfig(max_chain_length=max_chain_length)).solve().solutions
