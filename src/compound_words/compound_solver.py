# -*- coding: utf-8 -*-
import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .trie import TrieNode

logger = logging.getLogger(__name__)


class CompoundWordSolver:
    """Compound word finder (Trie + backtracking segmentation with restart at root)

    Strategy:
      - Every dictionary word is inserted into a Trie, terminal nodes keep the full word
      - A candidate is walked through the Trie one letter at a time
      - Whenever a terminal node is crossed, the search may also restart from the root
        to start matching the next sub-word
      - The candidate is compound only if the walk ends on a terminal node whose word
        is not the candidate itself
    """

    def __init__(self, words: Optional[Iterable[str]] = None, memoize: bool = True):
        self.trie = TrieNode()
        self.word_count = 0
        self.memoize = memoize
        if words is not None:
            for word in words:
                self.insert(word)

    def insert(self, word: str):
        """Inserts a word into the Trie."""
        if not word:
            return
        node = self.trie
        for letter in word:
            if letter not in node.children:
                node.children[letter] = TrieNode()
            node = node.children[letter]
        if not node.is_word:
            self.word_count += 1
        node.is_word = True
        node.full_word = word
        logger.debug("Inserted '%s'", word)

    def find_node(self, word: str) -> Optional[TrieNode]:
        """Returns the node at the end of the exact path for 'word', or None."""
        node = self.trie
        for letter in word:
            node = node.children.get(letter)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        node = self.find_node(word)
        return node is not None and node.is_word

    def is_compound(self, word: str, collect_subwords: bool = False) -> Tuple[bool, Set[str]]:
        """
        Checks whether 'word' is a concatenation of two or more dictionary words.

        Returns a tuple (is_compound, subwords). When collect_subwords is set, subwords
        holds every terminal word touched by the search, otherwise it is empty.
        """
        subwords: Set[str] = set()
        if not word:
            return False, subwords

        memo: Optional[Dict[Tuple[int, TrieNode], bool]] = {} if self.memoize else None
        result = self._search(
            word=word,
            subwords=subwords if collect_subwords else None,
            memo=memo
        )
        return result, subwords

    def _search(
        self,
        word: str,
        subwords: Optional[Set[str]],
        memo: Optional[Dict[Tuple[int, TrieNode], bool]]
    ) -> bool:
        """
        Depth-first search over (position, node) pairs with an explicit stack.

        Strategy:
        - At the end of 'word', succeed only on a terminal node that is not 'word' itself
        - Otherwise try to extend the current sub-word along the next letter
        - If that fails and a sub-word ends here, restart from the root at the same position
        - Every terminal node crossed is recorded, even on paths that fail

        Each frame is [node, position, stage]: stage 0 tries the extension, stage 1
        receives its outcome and may restart, stage 2 receives the final outcome.
        'returned' carries the outcome of the frame popped last.
        """
        stack: List[list] = [[self.trie, 0, 0]]
        returned = False

        while stack:
            frame = stack[-1]
            node, position, stage = frame

            if stage == 0:
                if memo is not None and (position, node) in memo:
                    returned = memo[(position, node)]
                    stack.pop()
                    continue

                if position == len(word):
                    # a word is never a compound of itself
                    returned = node.is_word and node.full_word != word
                    if returned and subwords is not None:
                        subwords.add(node.full_word)
                    if memo is not None:
                        memo[(position, node)] = returned
                    stack.pop()
                    continue

                frame[2] = 1
                child_node = node.children.get(word[position])
                if child_node is not None:
                    stack.append([child_node, position + 1, 0])
                    continue
                returned = False
                stage = 1

            if stage == 1:
                frame[2] = 2
                if node.is_word and not returned:
                    logger.debug("'%s': restarting from root at position %d after '%s'",
                                 word, position, node.full_word)
                    stack.append([self.trie, position, 0])
                    continue

            if node.is_word and subwords is not None:
                subwords.add(node.full_word)
            if memo is not None:
                memo[(position, node)] = returned
            stack.pop()

        return returned

    def find_compounds(self, words: Iterable[str]) -> List[str]:
        """Returns the compound words of 'words', keeping their order."""
        return [word for word in words if self.is_compound(word)[0]]

    def longest_compound(self, words: Iterable[str]) -> Optional[str]:
        """Returns the longest compound word; ties go to the first one found."""
        return longest_word(self.find_compounds(words))


def longest_word(words: Iterable[str]) -> Optional[str]:
    """Returns the longest of 'words'; ties go to the first one."""
    longest: Optional[str] = None
    for word in words:
        if longest is None or len(word) > len(longest):
            longest = word
    return longest
