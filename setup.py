from setuptools import setup, find_packages
setup(
    name = "libstructs",
    version = "0.1.0.dev0",
    description = "Classic in-memory data structures: hash map, LRU cache, segment tree, trie and union-find",
    author = "Various Developers",
    packages = find_packages(exclude=['tests', 'tests.*']),
    install_requires = [
        'attrs',
        ],
    extras_require = {
        'test': ['pytest'],
        },
    python_requires='>=3.8',
    )
