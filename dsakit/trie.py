"""A prefix tree over lowercase ASCII words."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    end: bool = False
    children: dict[str, _Node] = field(default_factory=dict)


def _check_letter(c: str) -> None:
    if not "a" <= c <= "z":
        raise ValueError(f"only letters a-z are allowed, got {c!r}")


class Trie:
    """Prefix tree storing words made of the letters a to z."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word`` to the tree."""
        node = self._root
        for c in word:
            _check_letter(c)
            node = node.children.setdefault(c, _Node())
        node.end = True

    def search(self, word: str) -> bool:
        """Return True when ``word`` was inserted."""
        node = self._word_node(word)
        return node is not None and node.end

    def start_with(self, prefix: str) -> bool:
        """Return True when some inserted word starts with ``prefix``."""
        return self._word_node(prefix) is not None

    def _word_node(self, prefix: str) -> _Node | None:
        node = self._root
        for c in prefix:
            _check_letter(c)
            child = node.children.get(c)
            if child is None:
                return None
            node = child
        return node