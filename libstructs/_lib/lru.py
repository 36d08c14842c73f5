"""
Least recently used cache.

>>> cache = LRUCache(2)
>>> cache.put(1, 'a')
>>> cache.put(2, 'b')
>>> cache.get(1)
'a'
>>> cache.put(3, 'c')
>>> cache.get(2) is None
True
>>> cache.get_keys()
[3, 1]
>>> print(cache.dump())
LRUCache (MRU -> LRU): [(3, 'c'), (1, 'a')]
Size: 2/2
"""
from __future__ import annotations

from typing import Any, Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar, Union

from .exceptions import StructValueError
from .options import Reporter

_KT = TypeVar('_KT', bound=Hashable)
_VT = TypeVar('_VT')
_DT = TypeVar('_DT')


class _Node(Generic[_KT, _VT]):
    """
    A link of the recency list, also used for the two sentinels.
    """
    __slots__ = ('key', 'value', 'prev', 'next')

    def __init__(self, key: Any = None, value: Any = None) -> None:
        self.key: _KT = key
        self.value: _VT = value
        self.prev: Optional[_Node[_KT, _VT]] = None
        self.next: Optional[_Node[_KT, _VT]] = None

    def __repr__(self) -> str:
        return f'<_Node {self.key!r}: {self.value!r}>'


class LRUCache(Reporter, Generic[_KT, _VT]):
    """
    Fixed capacity cache that evicts the least recently used entry.

    Entries are indexed by key in a dict and threaded through a doubly
    linked list ordered by recency: the most recently used entry follows the
    head sentinel, the least recently used precedes the tail sentinel.
    `get` and `put` are O(1).

    Parameters
    ----------
    capacity : int
        The maximum number of entries, must be greater than 0.
    """

    def __init__(self, capacity: int, **kw: Any) -> None:
        super().__init__(**kw)
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise StructValueError(self, f'capacity must be greater than 0, got {capacity!r}')
        self._capacity = capacity
        self._index: Dict[_KT, _Node[_KT, _VT]] = {}
        self._head: _Node[_KT, _VT] = _Node()
        self._tail: _Node[_KT, _VT] = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head

    @property
    def capacity(self) -> int:
        return self._capacity

    def __repr__(self) -> str:
        return '<LRUCache: {}/{}>'.format(len(self._index), self._capacity)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        # does not count as a use
        return key in self._index

    def __iter__(self) -> Iterator[_KT]:
        return iter(self.get_keys())

    # list primitives, the sentinels make them branchless

    def _add_node(self, node: _Node[_KT, _VT]) -> None:
        first = self._head.next
        assert first is not None
        node.prev = self._head
        node.next = first
        first.prev = node
        self._head.next = node

    def _remove_node(self, node: _Node[_KT, _VT]) -> None:
        prev, nxt = node.prev, node.next
        assert prev is not None and nxt is not None
        prev.next = nxt
        nxt.prev = prev

    def _move_to_head(self, node: _Node[_KT, _VT]) -> None:
        self._remove_node(node)
        self._add_node(node)

    def _pop_tail(self) -> _Node[_KT, _VT]:
        last = self._tail.prev
        assert last is not None and last is not self._head
        self._remove_node(last)
        return last

    def _walk(self) -> Iterator[_Node[_KT, _VT]]:
        node = self._head.next
        while node is not self._tail:
            assert node is not None
            yield node
            node = node.next

    # public API

    def get(self, key: _KT, default: _DT = None) -> Union[_VT, _DT]:  # type:ignore[assignment]
        """
        Get the value of the key and mark it as the most recently used,
        or return ``default`` if it's not cached.
        """
        node = self._index.get(key)
        if node is None:
            return default
        self._move_to_head(node)
        return node.value

    def put(self, key: _KT, value: _VT) -> None:
        """
        Insert or update a key-value pair and mark it as the most recently used.
        If the cache is full, the least recently used entry is evicted first.
        """
        node = self._index.get(key)
        if node is not None:
            node.value = value
            self._move_to_head(node)
            return
        if len(self._index) >= self._capacity:
            evicted = self._pop_tail()
            del self._index[evicted.key]
            self.msg('evicted', ctx=evicted.key, thresh=1)
        node = _Node(key, value)
        self._add_node(node)
        self._index[key] = node

    def delete(self, key: _KT) -> bool:
        """
        Remove the key from the cache.

        Returns
        -------
        bool
            True if the key was cached.
        """
        node = self._index.pop(key, None)
        if node is None:
            return False
        self._remove_node(node)
        return True

    def clear(self) -> None:
        self._index.clear()
        self._head.next = self._tail
        self._tail.prev = self._head

    def size(self) -> int:
        return len(self._index)

    def is_full(self) -> bool:
        return len(self._index) >= self._capacity

    def is_empty(self) -> bool:
        return not self._index

    def get_keys(self) -> List[_KT]:
        """Keys from the most to the least recently used."""
        return [node.key for node in self._walk()]

    def get_values(self) -> List[_VT]:
        """Values from the most to the least recently used."""
        return [node.value for node in self._walk()]

    def get_entries(self) -> List[Tuple[_KT, _VT]]:
        """Key-value pairs from the most to the least recently used."""
        return [(node.key, node.value) for node in self._walk()]

    def dump(self) -> str:
        return '{} (MRU -> LRU): {}\nSize: {}/{}'.format(
            type(self).__name__, self.get_entries(), len(self._index), self._capacity)
