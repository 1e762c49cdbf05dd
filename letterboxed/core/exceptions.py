"""Custom exception hierarchy for the Letter Boxed solver."""


class LetterBoxedError(Exception):
    """Base exception for solver failures."""


class MalformedPuzzle(LetterBoxedError, ValueError):
    """Raised when a puzzle string is not four sides of three unique letters."""


class DictionarySourceUnavailable(LetterBoxedError):
    """Raised when the word list cannot be read."""


class HintLookupError(LetterBoxedError):
    """Raised when the external dictionary service cannot produce a hint."""
