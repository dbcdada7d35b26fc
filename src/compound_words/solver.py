#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Compound Words - command line

Loads a word list, builds a Trie with every word and reports the longest word
that is a concatenation of other words of the same list, with its sub-words.

Usage:
    compound-words <input> [ <output> ]

The optional output file receives every compound word, one per line.
"""
import logging
import os
import sys
import time
from typing import List, Optional

from .compound_solver import CompoundWordSolver
from .constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV, USAGE
from .report import CompoundReport
from .word_loader import DictionaryLoadError, load_words

logger = logging.getLogger(__name__)


def log_level() -> int:
    """Returns the level named by the environment, or INFO for unknown names."""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def main(argv: Optional[List[str]] = None) -> int:
    """Runs the program and returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)

    if len(argv) not in (1, 2):
        sys.stderr.write(USAGE + "\n")
        return 1
    input_path = argv[0]
    output_path = argv[1] if len(argv) == 2 else None

    started = time.perf_counter()
    try:
        words = load_words(input_path)
    except DictionaryLoadError as e:
        logger.error(str(e))
        print(f"Can not load words from '{input_path}'", file=sys.stderr)
        return 1
    load_ms = (time.perf_counter() - started) * 1000

    started = time.perf_counter()
    solver = CompoundWordSolver(words)
    logger.info(f"Trie built with {solver.word_count} distinct words")
    report = CompoundReport.build(solver, words)
    if output_path is not None:
        report.write_compounds(output_path)
    report.load_ms = load_ms
    report.process_ms = (time.perf_counter() - started) * 1000

    logger.info(f"Found {len(report.compounds)} compound words")
    print(report.render())
    return 0


if __name__ == '__main__':
    sys.exit(main())
