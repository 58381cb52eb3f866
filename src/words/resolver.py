"""Dictionary validity for words that may contain wildcard placeholders."""

from collections.abc import Set
from string import ascii_lowercase
from typing import AbstractSet, Sequence, Union

from .models import WILDCARD


Words = Union[Sequence[str], AbstractSet[str]]


def is_valid(word: str, words: Words) -> bool:
    """
    Check whether `word` is a dictionary entry, filling wildcards as needed.

    A word without placeholders is valid iff it is in `words`. Otherwise the
    first placeholder is replaced by each letter a..z in turn and the result
    checked recursively, stopping at the first hit. A word with k
    placeholders costs up to 26**k lookups; racks hold at most two
    wildcards, so k stays small.

    Example, with words = ["apple", "apply", "cat", "dog"]:
        is_valid("a*ple", words)  -> True
        is_valid("d*g", words)    -> True
        is_valid("****", words)   -> False

    Args:
        word: Candidate word, possibly containing '*'
        words: The loaded dictionary (list or set)

    Returns:
        True if some substitution yields a dictionary word
    """
    lookup = words if isinstance(words, Set) else frozenset(words)
    return _resolve(word, lookup)


def _resolve(word: str, lookup: AbstractSet[str]) -> bool:
    if WILDCARD not in word:
        return word in lookup

    for letter in ascii_lowercase:
        if _resolve(word.replace(WILDCARD, letter, 1), lookup):
            return True

    return False
