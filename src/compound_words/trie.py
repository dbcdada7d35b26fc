# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Dict, Optional

class TrieNode:
    """Node of the dictionary Trie. Each node owns its children."""

    __slots__ = ('children', 'is_word', 'full_word')

    def __init__(self):
        self.children: Dict[str, 'TrieNode'] = {}
        self.is_word = False
        self.full_word: Optional[str] = None

    def __repr__(self) -> str:
        return f"TrieNode(full_word={self.full_word!r}, children={''.join(sorted(self.children))!r})"
