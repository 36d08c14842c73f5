"""
Hash table with separate chaining.

>>> colors = HashMap(17)
>>> colors.set('maroon', '#800000')
>>> colors.set('plum', '#DDA0DD')
>>> colors.set('violet', '#DDA0DD')
>>> colors.get('maroon')
'#800000'
>>> colors.get('nonexistent') is None
True
>>> colors.has('plum'), colors.size()
(True, 3)
>>> sorted(colors.unique_values())
['#800000', '#DDA0DD']
>>> colors.delete('maroon'), colors.delete('maroon')
(True, False)
>>> len(colors)
2
"""
from __future__ import annotations

from typing import Any, Collection, Generic, Iterator, List, Tuple, TypeVar, Union

from .exceptions import StructTypeError, StructValueError
from .options import Reporter

_VT = TypeVar('_VT')
_DT = TypeVar('_DT')

_missing: Any = object()


class HashMap(Reporter, Generic[_VT], Collection[str]):
    r"""
    String keyed hash table, collisions are resolved by chaining.

    Each bucket holds a chain of ``[key, value]`` pairs. The number of
    buckets is fixed at construction, there is no resizing: with :math:`N`
    entries and :math:`B` buckets, operations cost :math:`O(1 + N/B)` on average
    and :math:`O(N)` in the worst case (all keys in the same bucket).

    Parameters
    ----------
    size : int, optional, default: 53
        The number of buckets, a prime number spreads keys best.

    Attributes
    ----------
    capacity : int
        The number of buckets.

    count : int
        The number of entries.
    """

    PRIME = 31
    MAX_HASHED_CHARS = 100

    def __init__(self, size: int = 53, **kw: Any) -> None:
        super().__init__(**kw)
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise StructValueError(self, f'size must be a positive integer, got {size!r}')
        self.capacity = size
        self.count = 0
        self._buckets: List[List[List[Any]]] = [[] for _ in range(size)]

    def __repr__(self) -> str:
        return '<HashMap: count={}, capacity={}>'.format(self.count, self.capacity)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def _hash(self, key: str) -> int:
        """
        Polynomial rolling hash of the first `MAX_HASHED_CHARS` characters,
        reduced modulo the number of buckets at each step.
        """
        if not isinstance(key, str):
            raise StructTypeError(self, value=key, expected='str')
        total = 0
        for char in key[:self.MAX_HASHED_CHARS]:
            # letters a-z map to 1-26
            total = (total * self.PRIME + ord(char) - 96) % self.capacity
        return total

    def _chain(self, key: str) -> List[List[Any]]:
        return self._buckets[self._hash(key)]

    def set(self, key: str, value: _VT) -> None:
        """
        Insert a key-value pair, or overwrite the value of an existing key.
        """
        chain = self._chain(key)
        for pair in chain:
            if pair[0] == key:
                pair[1] = value
                return
        if chain:
            self.msg(f'collision with {len(chain)} other key(s)', ctx=key, thresh=2)
        chain.append([key, value])
        self.count += 1

    def get(self, key: str, default: _DT = None) -> Union[_VT, _DT]:  # type:ignore[assignment]
        """
        Get the value of the key, or ``default`` if it's not in the table.
        """
        for k, v in self._chain(key):
            if k == key:
                return v  # type:ignore[no-any-return]
        return default

    def delete(self, key: str) -> bool:
        """
        Remove the key from the table.

        Returns
        -------
        bool
            True if the key was present.
        """
        chain = self._chain(key)
        for i, pair in enumerate(chain):
            if pair[0] == key:
                del chain[i]
                self.count -= 1
                return True
        return False

    def has(self, key: str) -> bool:
        return self.get(key, _missing) is not _missing

    def _pairs(self) -> List[Tuple[str, _VT]]:
        return [(k, v) for chain in self._buckets for k, v in chain]

    def keys(self) -> Iterator[str]:
        """
        Iterate over a snapshot of the keys, in bucket order.
        """
        return iter([k for k, _ in self._pairs()])

    def values(self) -> Iterator[_VT]:
        """
        Iterate over a snapshot of the values, duplicates included.
        """
        return iter([v for _, v in self._pairs()])

    def unique_values(self) -> Iterator[_VT]:
        """
        Like `values` but every value is produced only once.
        """
        seen: set[Any] = set()
        unhashable: List[Any] = []
        unique: List[_VT] = []
        for _, value in self._pairs():
            try:
                if value in seen:
                    continue
                seen.add(value)
            except TypeError:
                if value in unhashable:
                    continue
                unhashable.append(value)
            unique.append(value)
        return iter(unique)

    def size(self) -> int:
        return self.count

    def is_empty(self) -> bool:
        return self.count == 0

    def clear(self) -> None:
        self._buckets = [[] for _ in range(self.capacity)]
        self.count = 0
