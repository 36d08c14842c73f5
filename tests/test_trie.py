from unittest import TestCase

from libstructs import Trie

WORDS = ["cat", "car", "card", "care", "careful"]

class TestTrie(TestCase):
    def setUp(self):
        self.trie = Trie()
        for w in WORDS:
            self.trie.insert(w)

    def test_search(self):
        for w in WORDS:
            assert self.trie.search(w)
            assert w in self.trie
        assert not self.trie.search("ca")
        assert not self.trie.search("carefully")
        assert not self.trie.search("dog")

    def test_starts_with(self):
        for w in WORDS:
            for i in range(len(w) + 1):
                assert self.trie.starts_with(w[:i])
        assert not self.trie.starts_with("cb")
        assert not self.trie.starts_with("carefully")

    def test_strict_prefix(self):
        assert not self.trie.search("caref")
        self.trie.insert("caref")
        assert self.trie.search("caref")
        assert self.trie.search("careful")

    def test_idempotent_insert(self):
        assert len(self.trie) == 5
        self.trie.insert("car")
        assert len(self.trie) == 5
        assert self.trie.search("car")

    def test_empty_key(self):
        assert self.trie.starts_with("")
        assert not self.trie.search("")
        self.trie.insert("")
        assert self.trie.search("")
        assert len(self.trie) == 6

    def test_keys_with_prefix(self):
        assert list(self.trie.keys_with_prefix("car")) == ["car", "card", "care", "careful"]
        assert list(self.trie.keys_with_prefix("")) == ["cat", "car", "card", "care", "careful"]
        assert list(self.trie.keys_with_prefix("x")) == []

    def test_shared_nodes(self):
        node = self.trie.root
        for c in "car":
            node = node.children[c]
        assert node.terminal
        assert sorted(node.children) == ["d", "e"]

def test_generic_symbols():
    trie = Trie()
    trie.insert((1, 2, 3))
    trie.insert([1, 2])
    assert trie.search([1, 2, 3])
    assert trie.search((1, 2))
    assert not trie.search((1,))
    assert trie.starts_with((1,))
    assert list(trie.keys_with_prefix((1,))) == [(1, 2), (1, 2, 3)]
    assert 5 not in trie
    assert [[1]] not in trie

def test_empty_trie():
    trie = Trie()
    assert len(trie) == 0
    assert trie.starts_with("")
    assert not trie.search("a")
    assert not trie.starts_with("a")


def test_string_prefix_on_tuple_keys():
    trie = Trie()
    trie.insert((1, 2))
    trie.insert("ab")
    assert list(trie.keys_with_prefix("")) == [(1, 2), "ab"]
    assert list(trie.keys_with_prefix("a")) == ["ab"]
