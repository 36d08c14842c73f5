"""
Classic in-memory data structures with strict complexity contracts.

Goals and non-goals
===================

The library provides five independent structures, each exposing a narrow
set of operations:

- `HashMap`: string keyed hash table with separate chaining, O(1) average operations.
- `LRUCache`: fixed capacity cache with O(1) ``get``/``put`` and least recently used eviction.
- `SegmentTree`: O(log n) point update, range query and range assignment
  under an associative operation (sum, min, max, gcd, lcm, xor, or, and).
- `Trie`: prefix tree with O(m) insert, search and prefix check.
- `UnionFind`: disjoint-set forest with union by rank and path compression.

The structures are single threaded: share an instance across threads only
behind a lock covering every call. There is no persistence and no resizing
beyond what is documented.

Configuration and errors
========================

Every structure accepts the `Options` as keyword arguments, for instance
``LRUCache(128, verbosity=1, outstream=sys.stderr)`` reports evictions.

Errors are reported with subclasses of `StructException`, they also derive
from the matching builtin exception (`ValueError`, `IndexError` or `TypeError`).
Misses are not errors: ``get`` returns a default value.

Some applications live in `libstructs.recipes`.
"""

from ._lib.options import Options
from ._lib.hashmap import HashMap
from ._lib.lru import LRUCache
from ._lib.segtree import (SegmentTree, SumSegmentTree, MinSegmentTree,
                           MaxSegmentTree, XorSegmentTree, Operation, OPERATIONS)
from ._lib.trie import Trie, TrieNode
from ._lib.unionfind import UnionFind
from ._lib.exceptions import *

__all__ = (

    "Options",

    "HashMap",
    "LRUCache",
    "SegmentTree",
    "SumSegmentTree",
    "MinSegmentTree",
    "MaxSegmentTree",
    "XorSegmentTree",
    "Operation",
    "OPERATIONS",
    "Trie",
    "TrieNode",
    "UnionFind",

    "StructException",
    "StructValueError",
    "StructIndexError",
    "StructRangeError",
    "StructTypeError",
)
