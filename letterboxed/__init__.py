"""Letter Boxed puzzle solver.

This package exposes the public API surface via:

- ``letterboxed.engine.letterboxed.LetterBoxed``: puzzle-to-solutions pipeline.
- ``letterboxed.engine.puzzle.Puzzle``: validated four-sided puzzle model.
- ``letterboxed.data.dictionary.WordDictionary``: word list loading into a trie.
- ``letterboxed.engine.solver.Solver``: bounded search over the puzzle graph.
"""

from .core.exceptions import DictionarySourceUnavailable, LetterBoxedError, MalformedPuzzle
from .core.models import PlayableWord, Solution
from .data.dictionary import DictionaryConfig, WordDictionary
from .data.trie import Trie
from .engine.graph import PuzzleGraph
from .engine.letterboxed import LetterBoxed, LetterBoxedConfig, solve_puzzle
from .engine.puzzle import Puzzle
from .engine.solver import SolveResult, Solver, SolverConfig

__all__ = [
    "DictionaryConfig",
    "DictionarySourceUnavailable",
    "LetterBoxed",
    "LetterBoxedConfig",
    "LetterBoxedError",
    "MalformedPuzzle",
    "PlayableWord",
    "Puzzle",
    "PuzzleGraph",
    "Solution",
    "SolveResult",
    "Solver",
    "SolverConfig",
    "Trie",
    "WordDictionary",
    "solve_puzzle",
]

__version__ = "0.1.0"
