"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"^[a-z]+$")


def strip_accents(text: str) -> str:
    """Fold accented letters to their ASCII base (``café`` -> ``cafe``)."""

    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def clean_word(text: str) -> str:
    """Return a normalized lowercase ASCII word, or ``""`` when unusable.

    Entries containing anything other than letters (apostrophes, hyphens,
    digits, spaces) are rejected outright instead of being squashed, since
    ``o'clock`` is not the word ``oclock``.
    """

    if not text:
        return ""
    candidate = strip_accents(text.strip()).lower()
    if not WORD_RE.match(candidate):
        return ""
    return candidate


__all__ = ["clean_word", "strip_accents"]
