# -*- coding: utf-8 -*-
import logging
import re
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

_NOT_A_LETTER = re.compile(r'[^A-Za-z]')


class DictionaryLoadError(OSError):
    """Raised when the word list can not be read."""


def normalize_word(line: str) -> str:
    """Keeps only the ASCII letters of 'line', lowercased."""
    return _NOT_A_LETTER.sub('', line).lower()


def load_words(path: Union[str, Path]) -> List[str]:
    """
    Reads a word list, one word per line, and returns it sorted.

    Every line is normalized with normalize_word; lines left empty are skipped.
    Duplicates are kept.
    """
    path = Path(path)
    words: List[str] = []
    try:
        with path.open('r', encoding='utf-8', errors='ignore') as f:
            for line in f:
                word = normalize_word(line)
                if not word:
                    continue
                words.append(word)
    except OSError as e:
        raise DictionaryLoadError(f"Can not load words from '{path}': {e}") from e

    words.sort()
    logger.info(f"Loaded {len(words)} words from {path}")
    return words
