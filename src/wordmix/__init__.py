"""wordmix - shuffle letters inside words, whole or vowels only."""

__version__ = "0.1.0"

from wordmix.errors import (
    DocumentParseError,
    InvalidMovableIndicesError,
    InvalidRangeError,
    ShuffleError,
)
from wordmix.schemas import ShuffleOptions
from wordmix.shuffle import shuffle, shuffle_all
from wordmix.statement import StatementShuffler, shuffle_statement
from wordmix.tokenizer import WordInfo, collect_words_info
from wordmix.xml import shuffle_document_text_values

__all__ = [
    "DocumentParseError",
    "InvalidMovableIndicesError",
    "InvalidRangeError",
    "ShuffleError",
    "ShuffleOptions",
    "StatementShuffler",
    "WordInfo",
    "collect_words_info",
    "shuffle",
    "shuffle_all",
    "shuffle_document_text_values",
    "shuffle_statement",
]
