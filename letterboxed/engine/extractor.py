"""Enumerate the dictionary words playable on a given puzzle."""

from __future__ import annotations

import time
from typing import List, Optional

from ..core.models import PlayableWord
from ..data.trie import Trie, TrieNode
from ..utils.logger import get_logger
from .puzzle import Puzzle

LOGGER = get_logger(__name__)


def extract_words(trie: Trie, puzzle: Puzzle, min_length: int = 2) -> List[PlayableWord]:
    """Return every word in ``trie`` that alternates sides on ``puzzle``.

    The walk starts from each puzzle letter and only descends into children
    that are puzzle letters on a different side from the letter just played.
    A repeated letter counts as the same side, so doubled letters never pass.
    """

    start = time.perf_counter()
    min_length = max(2, min_length)
    found: List[PlayableWord] = []

    for letter in puzzle.letters:
        node = trie.child(letter)
        if node is not None:
            _walk(node, letter, puzzle.bit(letter), puzzle, min_length, found)

    LOGGER.info(
        "Extracted %d playable words for %s in %.3fs",
        len(found),
        puzzle,
        time.perf_counter() - start,
    )
    return found


def _walk(
    node: TrieNode,
    prefix: str,
    mask: int,
    puzzle: Puzzle,
    min_length: int,
    found: List[PlayableWord],
) -> None:
    if node.is_word and len(prefix) >= min_length:
        found.append(PlayableWord(prefix, mask))
    if not node.children:
        return

    last = prefix[-1]
    for letter in puzzle.letters:
        if puzzle.same_side(last, letter):
            continue
        child: Optional[TrieNode] = node.children.get(letter)
        if child is not None:
            _walk(child, prefix + letter, mask | puzzle.bit(letter), puzzle, min_length, found)
