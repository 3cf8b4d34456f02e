"""String algorithms: the Z-function, borders, pattern counting and trie-based word splits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from algokit.combinatorics import MOD

_SEPARATOR = object()


def z_function(text: Sequence) -> list[int]:
    """z[i] is the length of the longest common prefix of text and text[i:]; z[0] is 0."""
    n = len(text)
    z = [0] * n
    left = right = 0  # the match window text[left:right] equals text[0:right - left]
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and text[z[i]] == text[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def finding_borders(text: str) -> list[int]:
    """Lengths of all proper borders of text (prefixes that are also suffixes), ascending."""
    n = len(text)
    z = z_function(text)
    return [n - i for i in range(n - 1, 0, -1) if z[i] == n - i]


def string_matching(text: str, pattern: str) -> int:
    """Number of positions at which pattern occurs in text, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    combined = [*pattern, _SEPARATOR, *text]
    m = len(pattern)
    return sum(1 for length in z_function(combined)[m + 1 :] if length == m)


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """Prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add a word to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.terminal = True

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return False
        return node.terminal

    def _word_lengths_at(self, text: str, start: int) -> Iterator[int]:
        """Lengths of non-empty stored words that text holds at position start."""
        node = self._root
        for length, char in enumerate(text[start:], start=1):
            node = node.children.get(char)
            if node is None:
                return
            if node.terminal:
                yield length


def word_combinations(text: str, words: Iterable[str]) -> int:
    """Ways to write text as a concatenation of the words, modulo 1e9+7."""
    trie = Trie()
    for word in words:
        trie.insert(word)
    ways = [0] * (len(text) + 1)
    ways[0] = 1
    for start in range(len(text)):
        if not ways[start]:
            continue
        for length in trie._word_lengths_at(text, start):
            ways[start + length] = (ways[start + length] + ways[start]) % MOD
    return ways[len(text)]