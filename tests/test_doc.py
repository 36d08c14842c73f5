import doctest
import unittest
import os

import libstructs
import libstructs.recipes
from libstructs._lib import hashmap, lru, segtree, trie, unionfind

class TestDoctest(unittest.TestCase):
    def test_lib_doctests(self):
        for mod in (libstructs, libstructs.recipes, hashmap, lru, segtree, trie, unionfind):
            with self.subTest(module=mod.__name__):
                failed, _ = doctest.testmod(mod, optionflags=doctest.ELLIPSIS|doctest.IGNORE_EXCEPTION_DETAIL)
                self.assertEqual(failed, 0)

    def test_readme(self):
        failed, _ = doctest.testfile(os.path.join("..", "README.md"))
        self.assertEqual(failed, 0)
