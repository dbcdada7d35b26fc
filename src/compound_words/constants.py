# -*- coding: utf-8 -*-

LOG_FORMAT: str = '%(asctime)s %(levelname)s: %(message)s'

# Environment variable holding the log level name; unknown names fall back to the default.
LOG_LEVEL_ENV: str = 'COMPOUND_WORDS_LOG_LEVEL'
DEFAULT_LOG_LEVEL: str = 'INFO'

USAGE: str = (
    "Usage: compound-words <input> [ <output> ]\n\n"
    "<input>   File containing the words. Only ASCII letters are kept, every\n"
    "          other character is dropped and the words are lowercased.\n"
    "<output>  Optional output file where the program saves the list of all\n"
    "          words which are concatenations of other sub-words that exist in\n"
    "          the input file.\n"
)
