"""
Segment tree over an associative operation.

>>> st = SumSegmentTree([1, 3, 5, 7, 9, 11])
>>> st.query(0, 2), st.query(1, 4), st.query(0, 5)
(9, 24, 36)
>>> st.update(2, 10)
>>> st.query(0, 2)
14
>>> st.range_update(1, 3, 0)
>>> st.get_array()
[1, 0, 0, 0, 9, 11]
>>> MinSegmentTree([5, 2, 8, 1, 9, 3]).query(1, 4)
1
>>> print(XorSegmentTree([1, 2, 3, 4]).dump())
Level 0: [4]
Level 1: [3, 7]
Level 2: [1, 2, 3, 4]
"""
from __future__ import annotations

import math
import operator
from typing import Any, Callable, Dict, List, NamedTuple, Sequence

from .exceptions import StructIndexError, StructRangeError, StructValueError
from .options import Reporter

_default: Any = object()


def _lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return a * b // math.gcd(a, b)


def _repeat_sum(value: Any, times: int) -> Any:
    return value * times


def _repeat_xor(value: Any, times: int) -> Any:
    return value if times % 2 else 0


def _repeat_idempotent(value: Any, times: int) -> Any:
    return value


class Operation(NamedTuple):
    """
    An associative operation the tree can be built with.
    """
    combine: Callable[[Any, Any], Any]
    identity: Any
    # combine of `times` copies of a value, used by range assignment
    repeat: Callable[[Any, int], Any]


OPERATIONS: Dict[str, Operation] = {
    'sum': Operation(operator.add, 0, _repeat_sum),
    'min': Operation(min, math.inf, _repeat_idempotent),
    'max': Operation(max, -math.inf, _repeat_idempotent),
    'gcd': Operation(math.gcd, 0, _repeat_idempotent),
    'lcm': Operation(_lcm, 1, _repeat_idempotent),
    'xor': Operation(operator.xor, 0, _repeat_xor),
    'or': Operation(operator.or_, 0, _repeat_idempotent),
    'and': Operation(operator.and_, -1, _repeat_idempotent),
}


class _NoAssign:
    """
    Sentinel for nodes without a pending range assignment.
    """
    def __repr__(self) -> str:
        return '<no-assign>'


class SegmentTree(Reporter):
    """
    Array-backed segment tree.

    The tree is stored in a flat list of ``2 * tree_size`` slots where
    ``tree_size`` is the smallest power of two not below the array length:
    the root is at index 1, the children of node ``i`` are ``2i`` and ``2i+1``
    and the leaves start at ``tree_size``. Unused leaves hold the identity.

    Range assignments are lazy: a node fully covered by the assigned window
    stores its new combined value and a pending marker that is pushed to its
    children the next time they are visited. `update`, `query` and
    `range_update` are all O(log n).

    Parameters
    ----------
    array : sequence
        The initial values.
    operation : str, optional, default: 'sum'
        One of the `OPERATIONS` keys.
    identity : optional
        Neutral element of the operation, defaults to the operation's usual one.
    """

    no_assign = _NoAssign()

    def __init__(self, array: Sequence[Any], operation: str = 'sum',
                 identity: Any = _default, **kw: Any) -> None:
        super().__init__(**kw)
        try:
            self._op = OPERATIONS[operation]
        except KeyError:
            raise StructValueError(self, f'unknown operation {operation!r}, '
                                   f'expected one of {", ".join(OPERATIONS)}') from None
        self.operation = operation
        self.identity = self._op.identity if identity is _default else identity
        self.size = len(array)
        self.tree_size = 1
        while self.tree_size < self.size:
            self.tree_size *= 2
        self.tree: List[Any] = [self.identity] * (2 * self.tree_size)
        self._lazy: List[Any] = [self.no_assign] * self.tree_size
        self._build(array)
        self.msg(f'built {operation} tree of {self.size} element(s) '
                 f'over {self.tree_size} leaves', thresh=2)

    def __repr__(self) -> str:
        return '<{}: operation={}, size={}>'.format(type(self).__name__, self.operation, self.size)

    def __len__(self) -> int:
        return self.size

    def combine(self, left: Any, right: Any) -> Any:
        return self._op.combine(left, right)

    def _build(self, array: Sequence[Any]) -> None:
        for i, value in enumerate(array):
            self.tree[self.tree_size + i] = value
        for i in range(self.tree_size - 1, 0, -1):
            self.tree[i] = self.combine(self.tree[2 * i], self.tree[2 * i + 1])

    # lazy assignment

    def _assign(self, node: int, value: Any, width: int) -> None:
        self.tree[node] = self._op.repeat(value, width)
        if node < self.tree_size:
            self._lazy[node] = value

    def _push(self, node: int, width: int) -> None:
        value = self._lazy[node]
        if value is self.no_assign:
            return
        half = width // 2
        self._assign(2 * node, value, half)
        self._assign(2 * node + 1, value, half)
        self._lazy[node] = self.no_assign

    def _push_path(self, leaf: int) -> None:
        # from the root down to the leaf's parent
        height = self.tree_size.bit_length() - 1
        for shift in range(height, 0, -1):
            node = leaf >> shift
            self._push(node, 1 << shift)

    def _push_all(self) -> None:
        width = self.tree_size
        level_start = 1
        while level_start < self.tree_size:
            for node in range(level_start, 2 * level_start):
                self._push(node, width)
            level_start *= 2
            width //= 2

    # validation

    def _check_range(self, left: int, right: int) -> None:
        if left < 0 or right >= self.size or left > right:
            raise StructRangeError(self, left=left, right=right, size=self.size)

    # public API

    def update(self, index: int, value: Any) -> None:
        """
        Replace the value at ``index`` and recompute its ancestors.

        Raises
        ------
        StructIndexError
            If the index is not in ``[0, len(self))``.
        """
        if index < 0 or index >= self.size:
            raise StructIndexError(self, index=index, size=self.size)
        pos = self.tree_size + index
        self._push_path(pos)
        self.tree[pos] = value
        pos //= 2
        while pos > 0:
            self.tree[pos] = self.combine(self.tree[2 * pos], self.tree[2 * pos + 1])
            pos //= 2

    def query(self, left: int, right: int) -> Any:
        """
        Combine the values of the inclusive range ``[left, right]``.

        Raises
        ------
        StructRangeError
            If ``left > right`` or a bound is not in ``[0, len(self))``.
        """
        self._check_range(left, right)
        return self._query(left, right, 0, self.tree_size - 1, 1)

    def _query(self, qleft: int, qright: int, nleft: int, nright: int, node: int) -> Any:
        # full overlap
        if qleft <= nleft and nright <= qright:
            return self.tree[node]
        # no overlap
        if qright < nleft or qleft > nright:
            return self.identity
        # partial overlap
        self._push(node, nright - nleft + 1)
        mid = (nleft + nright) // 2
        return self.combine(
            self._query(qleft, qright, nleft, mid, 2 * node),
            self._query(qleft, qright, mid + 1, nright, 2 * node + 1),
        )

    def range_update(self, left: int, right: int, value: Any) -> None:
        """
        Assign ``value`` to every position of the inclusive range ``[left, right]``.

        Raises
        ------
        StructRangeError
            If ``left > right`` or a bound is not in ``[0, len(self))``.
        """
        self._check_range(left, right)
        self.msg(f'assign {value!r}', ctx=(left, right), thresh=2)
        self._range_update(left, right, value, 0, self.tree_size - 1, 1)

    def _range_update(self, qleft: int, qright: int, value: Any,
                      nleft: int, nright: int, node: int) -> None:
        if qright < nleft or qleft > nright:
            return
        width = nright - nleft + 1
        if qleft <= nleft and nright <= qright:
            self._assign(node, value, width)
            return
        self._push(node, width)
        mid = (nleft + nright) // 2
        self._range_update(qleft, qright, value, nleft, mid, 2 * node)
        self._range_update(qleft, qright, value, mid + 1, nright, 2 * node + 1)
        self.tree[node] = self.combine(self.tree[2 * node], self.tree[2 * node + 1])

    def get_array(self) -> List[Any]:
        """
        The current values, pending assignments included.
        """
        self._push_all()
        return self.tree[self.tree_size:self.tree_size + self.size]

    def dump(self) -> str:
        """
        Render the tree level by level, root first.
        """
        self._push_all()
        lines = []
        level_start = 1
        level = 0
        while level_start < 2 * self.tree_size:
            lines.append(f'Level {level}: {self.tree[level_start:2 * level_start]}')
            level_start *= 2
            level += 1
        return '\n'.join(lines)


class SumSegmentTree(SegmentTree):
    def __init__(self, array: Sequence[Any], **kw: Any) -> None:
        super().__init__(array, 'sum', **kw)


class MinSegmentTree(SegmentTree):
    def __init__(self, array: Sequence[Any], **kw: Any) -> None:
        super().__init__(array, 'min', **kw)


class MaxSegmentTree(SegmentTree):
    def __init__(self, array: Sequence[Any], **kw: Any) -> None:
        super().__init__(array, 'max', **kw)


class XorSegmentTree(SegmentTree):
    def __init__(self, array: Sequence[Any], **kw: Any) -> None:
        super().__init__(array, 'xor', **kw)
