from __future__ import annotations

from typing import Iterable


class TrieNode:
    __slots__ = ("children", "is_word_end")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word_end: bool = False

    def child(self, ch: str) -> TrieNode | None:
        return self.children.get(ch)


class Trie:
    """Prefix tree over a word list.

    Built once, then only read while searching. Characters are stored exactly
    as given; callers decide any normalization before inserting.
    """

    def __init__(self):
        self.root = TrieNode()

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        trie = cls()
        for word in words:
            trie.add_word(word)
        return trie

    def add_word(self, word: str) -> Trie:
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        # An empty word marks the root itself
        node.is_word_end = True
        return self

    def find(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.child(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        node = self.find(word)
        return node is not None and node.is_word_end
