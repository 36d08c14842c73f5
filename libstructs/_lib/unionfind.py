"""
UnionFind over a fixed universe of integers.

>>> uf = UnionFind(6)
>>> uf
<UnionFind:
par=[0, 1, 2, 3, 4, 5],
rank=[0, 0, 0, 0, 0, 0],
n_elts=6,n_comps=6>
>>> uf.union(0, 1)
True
>>> uf.union(1, 2)
True
>>> uf.union(3, 4)
True
>>> uf
<UnionFind:
par=[0, 0, 0, 3, 3, 5],
rank=[1, 0, 0, 1, 0, 0],
n_elts=6,n_comps=3>
>>> uf.union(2, 0)
False
>>> uf.connected(0, 2), uf.connected(0, 3)
(True, False)
>>> uf.get_set_size(2)
3
>>> uf.components()
[[0, 1, 2], [3, 4], [5]]
"""
from __future__ import annotations

from typing import Any, Dict, List

from .exceptions import StructIndexError, StructValueError
from .options import Reporter


class UnionFind(Reporter):
    r"""
    Union-find disjoint sets datastructure.

    Union-find is a data structure that maintains disjoint set
    (called connected components or components in short) membership,
    and makes it easier to merge (union) two components, and to find
    if two elements are connected (i.e., belong to the same
    component).

    This implements union by rank with path compression over the
    elements ``0`` to ``n - 1``. The universe never changes after construction.

    Worst case for union and find: :math:`O(N + M \log^* N)`, with
    :math:`N` elements and :math:`M` unions. Each optimization alone
    only gives an :math:`O(\log N)` amortized bound, both are needed.

    Terms
    -----
    Component
        Elements belonging to the same disjoint set

    Connected
        Two elements are connected if they belong to the same component.

    Union
        The operation where two components are merged into one.

    Root
        An internal representative of a disjoint set.

    Find
        The operation to find the root of a disjoint set.

    Parameters
    ----------
    n : int
        The number of elements.

    Attributes
    ----------
    n_elts : int
        Number of elements.

    n_comps : int
        Number of disjoint sets or components.
    """

    def __init__(self, n: int, **kw: Any) -> None:
        super().__init__(**kw)
        if not isinstance(n, int) or isinstance(n, bool) or n < 0:
            raise StructValueError(self, f'size must be a non-negative integer, got {n!r}')
        self.n_elts = n
        self.n_comps = n
        self._par: List[int] = list(range(n))  # parent: for the internal tree structure
        self._rank: List[int] = [0] * n  # upper bound of the tree height - correct only for roots

    def __repr__(self) -> str:
        return (
            '<UnionFind:\npar={},\nrank={},\nn_elts={},n_comps={}>'
            .format(
                self._par,
                self._rank,
                self.n_elts,
                self.n_comps,
            ))

    def __len__(self) -> int:
        return self.n_elts

    def _check(self, x: int) -> None:
        if not isinstance(x, int) or isinstance(x, bool) or x < 0 or x >= self.n_elts:
            raise StructIndexError(self, index=x, size=self.n_elts)

    def find(self, x: int) -> int:
        """
        Find the root of the disjoint set containing the given element.

        Parameters
        ----------
        x : int

        Returns
        -------
        int
            The root.

        Raises
        ------
        StructIndexError
            If the element is not in ``[0, n)``.
        """
        self._check(x)
        root = x
        while root != self._par[root]:
            root = self._par[root]
        # path compression
        while x != root:
            self._par[x], x = root, self._par[x]
        return root

    def connected(self, x: int, y: int) -> bool:
        """Return whether the two given elements belong to the same component.

        Parameters
        ----------
        x : int
        y : int

        Returns
        -------
        bool
            True if x and y are connected, false otherwise.

        """
        return self.find(x) == self.find(y)

    def union(self, x: int, y: int) -> bool:
        """
        Merge the components of the two given elements into one.

        Parameters
        ----------
        x : int
        y : int

        Returns
        -------
        bool
            False if the elements were already connected.
        """
        xroot = self.find(x)
        yroot = self.find(y)
        if xroot == yroot:
            return False
        if self._rank[xroot] < self._rank[yroot]:
            self._par[xroot] = yroot
        elif self._rank[xroot] > self._rank[yroot]:
            self._par[yroot] = xroot
        else:
            self._par[yroot] = xroot
            self._rank[xroot] += 1
        self.n_comps -= 1
        self.msg(f'merged with {y!r}, {self.n_comps} component(s) left', ctx=x, thresh=2)
        return True

    def get_component_count(self) -> int:
        return self.n_comps

    def get_set_size(self, x: int) -> int:
        """
        Count the elements connected to the given one, this is O(n).
        """
        root = self.find(x)
        return sum(1 for i in range(self.n_elts) if self.find(i) == root)

    def component(self, x: int) -> List[int]:
        """Find the connected component containing the given element.

        Returns
        -------
        Sorted list of elements.
        """
        root = self.find(x)
        return [i for i in range(self.n_elts) if self.find(i) == root]

    def components(self) -> List[List[int]]:
        """Return the list of connected components.

        Returns
        -------
        list
            A list of sorted lists, ordered by their smallest element.
        """
        components_dict: Dict[int, List[int]] = {}
        for i in range(self.n_elts):
            components_dict.setdefault(self.find(i), []).append(i)
        return list(components_dict.values())
