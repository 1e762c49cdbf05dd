"""Puzzle graph: playable words indexed by (first, last, coverage mask)."""

from __future__ import annotations

import time
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Set, Tuple

from ..core.models import PlayableWord
from ..utils.logger import get_logger
from .puzzle import Puzzle

LOGGER = get_logger(__name__)

EdgeMap = Mapping[str, Mapping[int, Tuple[str, ...]]]

_EMPTY: EdgeMap = MappingProxyType({})


class PuzzleGraph:
    """Read-only adjacency structure consumed by the solver.

    ``graph[first][last][mask]`` holds every playable word that starts with
    ``first``, ends with ``last`` and uses exactly the letters in ``mask``.
    Words sharing a signature are interchangeable during search.
    """

    def __init__(self, puzzle: Puzzle, edges: Dict[str, Dict[str, Dict[int, List[str]]]]) -> None:
        self.puzzle = puzzle
        frozen: Dict[str, EdgeMap] = {}
        word_count = 0
        signature_count = 0
        for first, by_last in edges.items():
            frozen_last = {}
            for last, by_mask in by_last.items():
                frozen_last[last] = MappingProxyType(
                    {mask: tuple(words) for mask, words in by_mask.items()}
                )
                signature_count += len(by_mask)
                word_count += sum(len(words) for words in by_mask.values())
            frozen[first] = MappingProxyType(frozen_last)
        self._edges: Mapping[str, EdgeMap] = MappingProxyType(frozen)
        self.word_count = word_count
        self.signature_count = signature_count

    @classmethod
    def build(cls, words: Iterable[PlayableWord], puzzle: Puzzle) -> "PuzzleGraph":
        start = time.perf_counter()
        edges: Dict[str, Dict[str, Dict[int, List[str]]]] = {}
        seen: Set[str] = set()
        for word in words:
            if word.text in seen:
                continue
            seen.add(word.text)
            by_last = edges.setdefault(word.first, {})
            by_mask = by_last.setdefault(word.last, {})
            by_mask.setdefault(word.mask, []).append(word.text)

        graph = cls(puzzle, edges)
        LOGGER.info(
            "Built puzzle graph with %d words over %d signatures in %.3fs",
            graph.word_count,
            graph.signature_count,
            time.perf_counter() - start,
        )
        return graph

    def edges_from(self, first: str) -> EdgeMap:
        return self._edges.get(first, _EMPTY)

    def words_for(self, first: str, last: str, mask: int) -> Tuple[str, ...]:
        return self.edges_from(first).get(last, {}).get(mask, ())

    def signatures(self) -> Iterator[Tuple[str, str, int, Tuple[str, ...]]]:
        """Yield ``(first, last, mask, words)`` in puzzle letter order."""
        for first in self.puzzle.letters:
            by_last = self._edges.get(first)
            if not by_last:
                continue
            for last in self.puzzle.letters:
                by_mask = by_last.get(last)
                if not by_mask:
                    continue
                for mask in sorted(by_mask):
                    yield first, last, mask, by_mask[mask]

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        if not all(self.puzzle.is_valid_letter(char) for char in word):
            return False
        return word in self.words_for(word[0], word[-1], self.puzzle.mask_of(word))

    def __len__(self) -> int:
        return self.word_count
