"""Shared constants for the Letter Boxed solver."""

from __future__ import annotations

SIDE_COUNT = 4
SIDE_LENGTH = 3
LETTER_COUNT = SIDE_COUNT * SIDE_LENGTH

SIDE_SEPARATOR = "-"

DEFAULT_PUZZLE = "mrf-sna-opu-gci"
DEFAULT_MAX_CHAIN_LENGTH = 3

# Official rules require words of at least three letters.
DEFAULT_MIN_WORD_LENGTH = 3
