"""
Classic problems solved with the library structures.

>>> range_sum_queries([1, 2, 3, 4, 5], [(0, 2), (1, 3), (0, 4)])
[6, 9, 15]
>>> sliding_window_maximum([1, 3, -1, -3, 5, 3, 6, 7], 3)
[3, 3, 5, 5, 6, 7]
>>> count_smaller([5, 2, 6, 1])
[2, 1, 1, 0]
>>> count_connected_components(5, [(0, 1), (1, 2), (3, 4)])
2
>>> find_redundant_connection([(1, 2), (1, 3), (2, 3)])
(2, 3)
>>> minimum_spanning_tree(4, [(0, 1, 4), (0, 2, 3), (1, 2, 1), (1, 3, 2), (2, 3, 5)])
([(1, 2, 1), (1, 3, 2), (0, 2, 3)], 6)
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ._lib.exceptions import StructValueError
from ._lib.segtree import MaxSegmentTree, MinSegmentTree, SumSegmentTree
from ._lib.unionfind import UnionFind

Edge = Tuple[int, int]
WeightedEdge = Tuple[int, int, Any]

# segment tree recipes

def range_sum_queries(array: Sequence[Any], queries: Iterable[Tuple[int, int]]) -> List[Any]:
    st = SumSegmentTree(array)
    return [st.query(left, right) for left, right in queries]


def range_min_queries(array: Sequence[Any], queries: Iterable[Tuple[int, int]]) -> List[Any]:
    st = MinSegmentTree(array)
    return [st.query(left, right) for left, right in queries]


def sliding_window_maximum(array: Sequence[Any], k: int) -> List[Any]:
    """
    The maximum of every window of ``k`` consecutive values.
    """
    if k <= 0:
        raise StructValueError('sliding_window_maximum', f'window size must be positive, got {k!r}')
    if k > len(array):
        return []
    st = MaxSegmentTree(array)
    return [st.query(i, i + k - 1) for i in range(len(array) - k + 1)]


def count_smaller(array: Sequence[Any]) -> List[int]:
    """
    For each value, count the smaller values on its right.
    """
    # coordinate compression
    ranks = {value: rank for rank, value in enumerate(sorted(set(array)))}
    st = SumSegmentTree([0] * len(ranks))
    result = [0] * len(array)
    for i in range(len(array) - 1, -1, -1):
        rank = ranks[array[i]]
        if rank > 0:
            result[i] = st.query(0, rank - 1)
        st.update(rank, st.query(rank, rank) + 1)
    return result

# union-find recipes

def count_connected_components(n: int, edges: Iterable[Edge]) -> int:
    uf = UnionFind(n)
    for u, v in edges:
        uf.union(u, v)
    return uf.get_component_count()


def find_redundant_connection(edges: Sequence[Edge]) -> Optional[Edge]:
    """
    The first edge closing a cycle in a graph whose vertices are numbered from 1,
    or None if the edges form a forest.
    """
    uf = UnionFind(max((max(u, v) for u, v in edges), default=0) + 1)
    for u, v in edges:
        if not uf.union(u, v):
            return (u, v)
    return None


def minimum_spanning_tree(n: int, edges: Iterable[WeightedEdge]) -> Tuple[List[WeightedEdge], Any]:
    """
    Kruskal's algorithm.

    Returns
    -------
    tuple
        The edges of the tree, by increasing weight, and the total weight.
    """
    uf = UnionFind(n)
    tree: List[WeightedEdge] = []
    total: Any = 0
    for u, v, weight in sorted(edges, key=lambda e: e[2]):
        if uf.union(u, v):
            tree.append((u, v, weight))
            total += weight
    return tree, total


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """
    Number of groups in an adjacency matrix.
    """
    n = len(is_connected)
    uf = UnionFind(n)
    for i in range(n):
        for j in range(i + 1, n):
            if is_connected[i][j] == 1:
                uf.union(i, j)
    return uf.get_component_count()
