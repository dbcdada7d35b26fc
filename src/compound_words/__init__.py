# -*- coding: utf-8 -*-
"""
Compound Words - finds the dictionary words made up of other dictionary words.
"""
from .compound_solver import CompoundWordSolver
from .trie import TrieNode
from .word_loader import DictionaryLoadError, load_words, normalize_word

__all__ = [
    'CompoundWordSolver',
    'TrieNode',
    'DictionaryLoadError',
    'load_words',
    'normalize_word',
]

__version__ = '1.0.0'
