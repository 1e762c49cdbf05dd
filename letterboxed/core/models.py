"""Data models shared by the extractor, graph and solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class PlayableWord:
    """A dictionary word that alternates sides on the current puzzle."""

    text: str
    mask: int

    @property
    def first(self) -> str:
        return self.text[0]

    @property
    def last(self) -> str:
        return self.text[-1]

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class Solution:
    """An ordered chain of words covering every letter of the puzzle."""

    words: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    @property
    def letters(self) -> frozenset[str]:
        return frozenset("".join(self.words))

    def __str__(self) -> str:
        return " - ".join(self.words)
