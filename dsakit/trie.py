"""A prefix tree of words."""

from dataclasses import dataclass, field

__all__ = ["Trie"]


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    is_terminal: bool = False


class Trie:
    """A set of words stored character by character."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word``."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_terminal = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted as a whole word."""
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)