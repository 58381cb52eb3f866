"""Word construction, dictionary loading and search."""

from .models import WILDCARD, TileMultiset, WordAssignment, DictionaryResult
from .matching import can_construct, construct, count_tiles
from .resolver import is_valid
from .search import LETTER_SCORES, base_score, possible_words, best_possible_words
from .loader import DictionaryLoader, DEFAULT_DICTIONARY, fetch_word_list, parse_word_list

__all__ = [
    # Models
    "WILDCARD",
    "TileMultiset",
    "WordAssignment",
    "DictionaryResult",
    # Matching
    "can_construct",
    "construct",
    "count_tiles",
    # Resolving
    "is_valid",
    # Search
    "LETTER_SCORES",
    "base_score",
    "possible_words",
    "best_possible_words",
    # Loading
    "DictionaryLoader",
    "DEFAULT_DICTIONARY",
    "fetch_word_list",
    "parse_word_list",
]
