"""Puzzle model: four sides of three letters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Sequence, Tuple

from ..core.constants import SIDE_COUNT, SIDE_LENGTH, SIDE_SEPARATOR
from ..core.exceptions import MalformedPuzzle

Side = Tuple[str, str, str]


@dataclass(frozen=True)
class Puzzle:
    """Validated, immutable Letter Boxed puzzle.

    Letters are numbered in side order; letter ``i`` owns bit ``1 << i`` in
    every coverage mask produced by :meth:`mask_of`.
    """

    sides: Tuple[Side, ...]
    letters: Tuple[str, ...] = field(init=False)
    _side_index: Dict[str, int] = field(init=False, repr=False, compare=False)
    _bits: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __init__(self, sides: Iterable[str]) -> None:
        validated = _validate_sides(list(sides))
        letters = tuple(letter for side in validated for letter in side)
        object.__setattr__(self, "sides", validated)
        object.__setattr__(self, "letters", letters)
        object.__setattr__(
            self,
            "_side_index",
            {letter: index for index, side in enumerate(validated) for letter in side},
        )
        object.__setattr__(self, "_bits", {letter: 1 << i for i, letter in enumerate(letters)})

    @classmethod
    def parse(cls, text: str, separator: str = SIDE_SEPARATOR) -> "Puzzle":
        """Build a puzzle from ``"abc-def-ghi-jkl"`` style input."""
        if text is None:
            raise MalformedPuzzle("Puzzle string is empty")
        cleaned = text.strip().lower()
        if not cleaned:
            raise MalformedPuzzle("Puzzle string is empty")
        return cls(part.strip() for part in cleaned.split(separator))

    # ------------------------------------------------------------------
    # Letter membership
    # ------------------------------------------------------------------
    @property
    def valid_letters(self) -> FrozenSet[str]:
        return frozenset(self.letters)

    @property
    def full_mask(self) -> int:
        return (1 << len(self.letters)) - 1

    def is_valid_letter(self, letter: str) -> bool:
        return letter in self._side_index

    def side_of(self, letter: str) -> int:
        """Return the index of the side holding ``letter``."""
        try:
            return self._side_index[letter]
        except KeyError:
            raise KeyError(f"'{letter}' is not a letter of puzzle {self}") from None

    def same_side(self, a: str, b: str) -> bool:
        side_a = self._side_index.get(a)
        return side_a is not None and side_a == self._side_index.get(b)

    # ------------------------------------------------------------------
    # Coverage masks
    # ------------------------------------------------------------------
    def bit(self, letter: str) -> int:
        return self._bits[letter]

    def mask_of(self, word: str) -> int:
        mask = 0
        for char in word:
            mask |= self._bits[char]
        return mask

    def letters_of(self, mask: int) -> str:
        return "".join(letter for letter in self.letters if mask & self._bits[letter])

    def missing_letters(self, mask: int) -> str:
        return self.letters_of(self.full_mask & ~mask)

    def is_playable(self, word: str) -> bool:
        """Whether ``word`` uses only puzzle letters and alternates sides."""
        if not word or any(char not in self._side_index for char in word):
            return False
        return all(not self.same_side(a, b) for a, b in zip(word, word[1:]))

    def __str__(self) -> str:
        return SIDE_SEPARATOR.join("".join(side) for side in self.sides)


def _validate_sides(sides: Sequence[str]) -> Tuple[Side, ...]:
    if len(sides) != SIDE_COUNT:
        raise MalformedPuzzle(f"Expected {SIDE_COUNT} sides, got {len(sides)}: {list(sides)}")

    seen: Dict[str, int] = {}
    validated: List[Side] = []
    for index, raw_side in enumerate(sides):
        side = "".join(raw_side).strip().lower()
        if len(side) != SIDE_LENGTH:
            raise MalformedPuzzle(
                f"Side {index + 1} '{side}' has {len(side)} letters, expected {SIDE_LENGTH}"
            )
        for letter in side:
            if not ("a" <= letter <= "z"):
                raise MalformedPuzzle(f"Side {index + 1} '{side}' contains non-letter '{letter}'")
            if letter in seen:
                where = "twice on" if seen[letter] == index else f"on side {seen[letter] + 1} and"
                raise MalformedPuzzle(f"Letter '{letter}' appears {where} side {index + 1}")
            seen[letter] = index
        validated.append((side[0], side[1], side[2]))

    return tuple(validated)
