"""
Prefix tree.

>>> trie = Trie()
>>> trie.insert("apple")
>>> trie.search("apple"), trie.search("app"), trie.starts_with("app")
(True, False, True)
>>> trie.insert("app")
>>> trie.search("app")
True
>>> list(trie.keys_with_prefix("ap"))
['app', 'apple']
"""
from __future__ import annotations

from typing import Any, Dict, Generic, Hashable, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

from .options import Reporter

T = TypeVar('T', bound=Hashable)


class TrieNode(Generic[T]):
    """
    A node maps symbols to child nodes, ``terminal`` marks the end of a key.
    """
    __slots__ = ('children', 'terminal')

    def __init__(self) -> None:
        self.children: Dict[T, TrieNode[T]] = {}
        self.terminal = False

    def __repr__(self) -> str:
        return '<TrieNode: children={}, terminal={}>'.format(list(self.children), self.terminal)


class Trie(Reporter, Generic[T]):
    """
    Prefix tree over sequences of hashable symbols, usually strings.

    `insert`, `search` and `starts_with` run in O(m) for a key of length m.
    """

    def __init__(self, **kw: Any) -> None:
        super().__init__(**kw)
        self.root: TrieNode[T] = TrieNode()
        self._count = 0

    def __repr__(self) -> str:
        return '<Trie: {} key(s)>'.format(self._count)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        try:
            return self.search(key)  # type:ignore[arg-type]
        except TypeError:
            return False

    def _walk(self, key: Sequence[T]) -> Optional[TrieNode[T]]:
        node = self.root
        for symbol in key:
            child = node.children.get(symbol)
            if child is None:
                return None
            node = child
        return node

    def insert(self, key: Sequence[T]) -> None:
        """
        Add a key, inserting it twice has no effect.
        """
        node = self.root
        for symbol in key:
            child = node.children.get(symbol)
            if child is None:
                child = node.children[symbol] = TrieNode()
            node = child
        if not node.terminal:
            node.terminal = True
            self._count += 1

    def search(self, key: Sequence[T]) -> bool:
        """
        Whether the key has been inserted. A prefix of an inserted key is not found
        unless it has been inserted itself.
        """
        node = self._walk(key)
        return node is not None and node.terminal

    def starts_with(self, prefix: Sequence[T]) -> bool:
        """
        Whether some inserted key starts with the prefix.
        """
        return self._walk(prefix) is not None

    def keys_with_prefix(self, prefix: Sequence[T]) -> Iterator[Union[str, Tuple[T, ...]]]:
        """
        Iterate over the inserted keys starting with the prefix, depth first.
        Keys made of strings are joined back when the prefix is a string,
        other keys are tuples.
        """
        node = self._walk(prefix)
        if node is None:
            return
        as_str = isinstance(prefix, str)
        # explicit stack, children are pushed reversed to keep insertion order
        stack: List[Tuple[TrieNode[T], Tuple[T, ...]]] = [(node, tuple(prefix))]
        while stack:
            node, path = stack.pop()
            if node.terminal:
                if as_str and all(isinstance(s, str) for s in path):
                    yield ''.join(path)  # type:ignore[arg-type]
                else:
                    yield path
            for symbol, child in reversed(list(node.children.items())):
                stack.append((child, path + (symbol,)))
