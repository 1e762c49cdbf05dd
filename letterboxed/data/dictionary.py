"""Word list loading into the trie index."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from ..core.constants import DEFAULT_MIN_WORD_LENGTH
from ..core.exceptions import DictionarySourceUnavailable
from ..utils.logger import get_logger
from .normalization import clean_word
from .trie import Trie

LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Configuration for word list loading and filtering."""

    path: Path | str
    min_length: int = DEFAULT_MIN_WORD_LENGTH
    max_length: Optional[int] = None
    encoding: str = "utf-8"
    comment_prefix: str = "#"


def iter_word_file(config: DictionaryConfig) -> Iterator[str]:
    """Yield raw entries from a newline-delimited word file.

    Blank lines and comment lines are skipped; everything else is returned
    untouched so the caller decides how to normalize it.
    """

    source = Path(config.path)
    try:
        with source.open("r", encoding=config.encoding) as handle:
            for line in handle:
                line = line.strip()
                if not line or (config.comment_prefix and line.startswith(config.comment_prefix)):
                    continue
                yield line
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionarySourceUnavailable(f"Cannot read word list {source}: {exc}") from exc


class WordDictionary:
    """Normalized word list backed by a :class:`Trie`."""

    def __init__(
        self,
        config: Optional[DictionaryConfig] = None,
        *,
        min_length: int = DEFAULT_MIN_WORD_LENGTH,
        max_length: Optional[int] = None,
    ) -> None:
        self.config = config
        self.min_length = config.min_length if config is not None else min_length
        self.max_length = config.max_length if config is not None else max_length
        self.trie = Trie()
        self.skipped = 0
        if config is not None:
            self._load(config)

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        *,
        min_length: int = DEFAULT_MIN_WORD_LENGTH,
        max_length: Optional[int] = None,
    ) -> "WordDictionary":
        dictionary = cls(min_length=min_length, max_length=max_length)
        dictionary.add_words(words)
        return dictionary

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def _load(self, config: DictionaryConfig) -> None:
        start = time.perf_counter()
        self.add_words(iter_word_file(config))
        LOGGER.info(
            "Loaded %d words from %s in %.3fs (%d entries skipped)",
            len(self.trie),
            config.path,
            time.perf_counter() - start,
            self.skipped,
        )

    def add_words(self, words: Iterable[str]) -> None:
        for raw in words:
            word = self.sanitize(raw)
            if not word or not self._length_ok(word):
                self.skipped += 1
                continue
            self.trie.insert(word)

    def _length_ok(self, word: str) -> bool:
        if len(word) < self.min_length:
            return False
        return self.max_length is None or len(word) <= self.max_length

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def sanitize(self, text: str) -> str:
        return clean_word(text)

    def contains(self, word: str) -> bool:
        return self.trie.search(self.sanitize(word))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.trie)

    def words(self) -> List[str]:
        return list(self.trie)


def load_word_list(config: DictionaryConfig) -> WordDictionary:
    """Read ``config.path`` into a :class:`WordDictionary`."""

    return WordDictionary(config)
