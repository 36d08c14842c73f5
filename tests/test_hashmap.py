import io
import random
from unittest import TestCase

import pytest

from libstructs import HashMap, StructTypeError, StructValueError

COLORS = {
    'maroon': '#800000',
    'yellow': '#FFFF00',
    'olive': '#808000',
    'salmon': '#FA8072',
    'lightcoral': '#F08080',
    'mediumvioletred': '#C71585',
    'plum': '#DDA0DD',
    'purple': '#DDA0DD',
    'violet': '#DDA0DD',
}

class TestHashMap(TestCase):
    def setUp(self):
        self.ht = HashMap(17)
        for k, v in COLORS.items():
            self.ht.set(k, v)

    def test_set_get(self):
        assert self.ht.size() == 9
        assert not self.ht.is_empty()
        assert self.ht.get('maroon') == '#800000'
        assert self.ht.get('nonexistent') is None
        assert self.ht.get('nonexistent', 'x') == 'x'
        assert self.ht.has('maroon')
        assert not self.ht.has('nonexistent')
        assert 'olive' in self.ht
        assert 42 not in self.ht

    def test_overwrite(self):
        self.ht.set('maroon', '#800001')
        assert self.ht.get('maroon') == '#800001'
        assert self.ht.size() == 9

    def test_keys_values(self):
        assert sorted(self.ht.keys()) == sorted(COLORS)
        assert sorted(self.ht.values()) == sorted(COLORS.values())
        assert sorted(self.ht.unique_values()) == sorted(set(COLORS.values()))
        assert list(self.ht) == list(self.ht.keys())

    def test_bucket_order(self):
        ht = HashMap(53)
        for k in ['b', 'a', 'c']:
            ht.set(k, k.upper())
        # 'a' -> 1, 'b' -> 2, 'c' -> 3
        assert list(ht.keys()) == ['a', 'b', 'c']
        assert list(ht.values()) == ['A', 'B', 'C']

    def test_snapshot_is_one_shot(self):
        keys = self.ht.keys()
        self.ht.set('black', '#000000')
        assert len(list(keys)) == 9
        assert list(keys) == []

    def test_delete(self):
        assert self.ht.delete('maroon')
        assert not self.ht.delete('maroon')
        assert not self.ht.delete('nonexistent')
        assert self.ht.size() == 8
        assert not self.ht.has('maroon')
        assert self.ht.get('maroon') is None

    def test_clear(self):
        self.ht.clear()
        assert self.ht.size() == 0
        assert self.ht.is_empty()
        assert list(self.ht.keys()) == []
        assert self.ht.capacity == 17

    def test_none_value_is_present(self):
        self.ht.set('none', None)
        assert self.ht.has('none')
        assert 'none' in self.ht

    def test_unique_values_unhashable(self):
        ht = HashMap(5)
        ht.set('a', [1])
        ht.set('b', [1])
        ht.set('c', 2)
        assert sorted(map(str, ht.unique_values())) == ['2', '[1]']

def test_hash_range():
    rnd = random.Random(1)
    for capacity in (1, 2, 17, 53, 101):
        ht = HashMap(capacity)
        for _ in range(200):
            key = ''.join(chr(rnd.randrange(32, 0x2FF)) for _ in range(rnd.randrange(0, 150)))
            index = ht._hash(key)
            assert 0 <= index < capacity
            assert index == ht._hash(key)

def test_hash_only_first_chars():
    ht = HashMap(53)
    prefix = 'x' * HashMap.MAX_HASHED_CHARS
    assert ht._hash(prefix + 'a') == ht._hash(prefix + 'b')
    ht.set(prefix + 'a', 1)
    ht.set(prefix + 'b', 2)
    assert ht.get(prefix + 'a') == 1
    assert ht.get(prefix + 'b') == 2

def test_hash_empty_key():
    ht = HashMap()
    assert ht._hash('') == 0
    ht.set('', 'empty')
    assert ht.get('') == 'empty'

def test_count_invariant():
    rnd = random.Random(7)
    ht = HashMap(7)
    model = {}
    for _ in range(500):
        key = rnd.choice('abcdefghijklmnop') * rnd.randrange(1, 4)
        if rnd.random() < 0.6:
            ht.set(key, len(model))
            model[key] = len(model)
        else:
            assert ht.delete(key) == (model.pop(key, None) is not None)
        assert len(ht) == len(model)
    assert dict(zip(ht.keys(), ht.values())) == model

def test_invalid():
    with pytest.raises(StructValueError):
        HashMap(0)
    with pytest.raises(ValueError):
        HashMap(-3)
    ht = HashMap()
    with pytest.raises(StructTypeError):
        ht.set(1, 'one')
    with pytest.raises(TypeError, match='Expected str, got: int'):
        ht.get(1)

def test_collision_message():
    out = io.StringIO()
    ht = HashMap(1, verbosity=2, outstream=out)
    ht.set('a', 1)
    ht.set('b', 2)
    ht.set('b', 3)
    assert out.getvalue() == "HashMap['b']: collision with 1 other key(s)\n"


def test_bool_size():
    with pytest.raises(StructValueError):
        HashMap(True)
