"""Prefix tree holding the flagged-word dictionary.

Keys are single characters and lookups are case-sensitive; the filter only
ever inserts and queries lowercase strings.
"""

from __future__ import annotations
from typing import Iterable, Iterator


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_word = False


class Trie:
    """Character trie with exact, anywhere and longest-prefix queries."""

    __slots__ = ("root", "_size")

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.root = TrieNode()
        self._size = 0
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add *word*. Inserting "" marks the root, which matches everywhere."""
        node = self.root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def contains(self, word: str) -> bool:
        """True only if *word* itself was inserted (a bare prefix is not enough)."""
        node = self.root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return False
        return node.is_word

    def contains_in(self, text: str) -> bool:
        """True if any dictionary word occurs anywhere inside *text*."""
        for i in range(len(text)):
            node = self.root
            for char in text[i:]:
                node = node.children.get(char)
                if node is None:
                    break
                if node.is_word:
                    return True
        return False

    def match_length_at(self, text: str, start: int) -> int:
        """Length of the longest dictionary word beginning at *start*, or 0."""
        node = self.root
        longest = 0
        for i in range(start, len(text)):
            node = node.children.get(text[i])
            if node is None:
                break
            if node.is_word:
                longest = i - start + 1
        return longest

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        """Yield stored words in lexicographic order."""
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                yield prefix
            for char in sorted(node.children, reverse=True):
                stack.append((node.children[char], prefix + char))
