"""Letter Boxed orchestration: puzzle -> playable words -> graph -> solutions."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from ..core.constants import DEFAULT_MAX_CHAIN_LENGTH, DEFAULT_MIN_WORD_LENGTH
from ..core.models import PlayableWord
from ..data.dictionary import DictionaryConfig, WordDictionary
from ..utils.logger import get_logger
from .extractor import extract_words
from .graph import PuzzleGraph
from .puzzle import Puzzle
from .solver import SolveResult, Solver, SolverConfig

LOGGER = get_logger(__name__)


@dataclass
class LetterBoxedConfig:
    puzzle: str
    dictionary_path: Optional[Path | str] = None
    max_chain_length: int = DEFAULT_MAX_CHAIN_LENGTH
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    timeout_seconds: Optional[float] = None
    max_workers: int = 1

    def to_dictionary_config(self) -> DictionaryConfig:
        if self.dictionary_path is None:
            raise ValueError("dictionary_path is required to load a word list")
        return DictionaryConfig(path=self.dictionary_path, min_length=self.min_word_length)

    def to_solver_config(self) -> SolverConfig:
        return SolverConfig(
            max_chain_length=self.max_chain_length,
            timeout_seconds=self.timeout_seconds,
            max_workers=self.max_workers,
        )


class LetterBoxed:
    """Solver for one puzzle against one dictionary.

    The playable word list and the puzzle graph are computed once at
    construction; :meth:`solve` may be called repeatedly.
    """

    def __init__(
        self,
        config: LetterBoxedConfig,
        dictionary: Optional[WordDictionary] = None,
    ) -> None:
        start = time.perf_counter()
        self.config = config
        self.puzzle = Puzzle.parse(config.puzzle)
        self.solver_config = config.to_solver_config()
        self.dictionary = (
            dictionary if dictionary is not None else WordDictionary(config.to_dictionary_config())
        )
        self.words: List[PlayableWord] = extract_words(
            self.dictionary.trie, self.puzzle, min_length=config.min_word_length
        )
        self.graph = PuzzleGraph.build(self.words, self.puzzle)
        LOGGER.info(
            "Initialized puzzle %s in %.3fs",
            self.puzzle,
            time.perf_counter() - start,
        )

    @classmethod
    def from_words(
        cls,
        puzzle: str,
        words: List[str],
        max_chain_length: int = DEFAULT_MAX_CHAIN_LENGTH,
        min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
    ) -> "LetterBoxed":
        config = LetterBoxedConfig(
            puzzle=puzzle,
            max_chain_length=max_chain_length,
            min_word_length=min_word_length,
        )
        dictionary = WordDictionary.from_words(words, min_length=min_word_length)
        return cls(config, dictionary=dictionary)

    def solve(self) -> SolveResult:
        LOGGER.info(
            "Solving %s with %d playable words (max %d words per chain)",
            self.puzzle,
            len(self.words),
            self.solver_config.max_chain_length,
        )
        return Solver(self.graph, self.solver_config).solve()


def solve_puzzle(
    puzzle: str,
    dictionary: Union[WordDictionary, Path, str],
    max_chain_length: int = DEFAULT_MAX_CHAIN_LENGTH,
) -> SolveResult:
    """One-shot helper used by scripts and the CLI tests."""

    if isinstance(dictionary, WordDictionary):
        config = LetterBoxedConfig(puzzle=puzzle, max_chain_length=max_chain_length)
        return LetterBoxed(config, dictionary=dictionary).solve()
    config = LetterBoxedConfig(
        puzzle=puzzle,
        dictionary_path=dictionary,
        max_chain_length=max_chain_length,
    )
    return LetterBoxed(config).solve()
