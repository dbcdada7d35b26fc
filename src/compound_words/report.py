# -*- coding: utf-8 -*-
import logging
from pathlib import Path
from typing import List, Optional, Union

from .compound_solver import CompoundWordSolver, longest_word

logger = logging.getLogger(__name__)


class CompoundReport:
    """Results of classifying a whole word list."""

    def __init__(self, words: List[str], compounds: List[str], longest: Optional[str],
                 subwords: List[str], load_ms: float = 0.0, process_ms: float = 0.0):
        self.words = words
        self.compounds = compounds
        self.longest = longest
        self.subwords = subwords
        self.load_ms = load_ms
        self.process_ms = process_ms

    @classmethod
    def build(cls, solver: CompoundWordSolver, words: List[str]) -> 'CompoundReport':
        """Classifies every word and picks the longest compound (first one on ties)."""
        compounds = solver.find_compounds(words)
        longest = longest_word(compounds)

        subwords: List[str] = []
        if longest is not None:
            _, found = solver.is_compound(longest, collect_subwords=True)
            subwords = sorted(found)
        return cls(words, compounds, longest, subwords)

    def write_compounds(self, path: Union[str, Path]) -> bool:
        """Writes the compound words, one per line. Returns False if the file can't be written."""
        try:
            Path(path).write_text(''.join(f"{word}\n" for word in self.compounds), encoding='utf-8')
        except OSError as e:
            logger.warning(f"Could not write compound words to {path}: {e}")
            return False
        logger.info(f"Saved {len(self.compounds)} compound words to {path}")
        return True

    def render(self) -> str:
        lines = [f"Loaded {len(self.words)} words", ""]
        if self.longest is None:
            lines += ["No compound words found", ""]
        else:
            lines += [
                f"The longest compound word is '{self.longest}'",
                "",
                f"Sub-words of '{self.longest}':",
                "    " + " ".join(self.subwords),
                "",
            ]
        lines += [
            f"Preparation time: {self.load_ms:.0f} ms",
            f" Processing time: {self.process_ms:.0f} ms",
        ]
        return "\n".join(lines)
