"""Prefix tree used as the dictionary index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Tuple


@dataclass
class TrieNode:
    """One prefix position in the trie."""

    children: Dict[str, "TrieNode"] = field(default_factory=dict)
    is_word: bool = False

    def child(self, letter: str) -> Optional["TrieNode"]:
        return self.children.get(letter)


class Trie:
    """Lowercase word index supporting exact search and guided traversal.

    Nodes carry no parent pointer; callers walking the tree rebuild words by
    threading the prefix through their own recursion (see
    :func:`letterboxed.engine.extractor.extract_words`).
    """

    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        self.root = TrieNode()
        self._size = 0
        if words is not None:
            self.update(words)

    def insert(self, word: str) -> None:
        if not word:
            return
        node = self.root
        for char in word:
            nxt = node.children.get(char)
            if nxt is None:
                nxt = TrieNode()
                node.children[char] = nxt
            node = nxt
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def update(self, words: Iterable[str]) -> None:
        for word in words:
            self.insert(word)

    def search(self, word: str) -> bool:
        node = self.find(word)
        return node is not None and node.is_word

    def find(self, prefix: str) -> Optional[TrieNode]:
        """Return the node reached by ``prefix`` or ``None``."""
        node = self.root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def child(self, letter: str) -> Optional[TrieNode]:
        return self.root.children.get(letter)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        stack: list[Tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                yield prefix
            for char in sorted(node.children, reverse=True):
                stack.append((node.children[char], prefix + char))
