"""Dictionary search for constructible and best-scoring words."""

from typing import Dict, Iterable, List, Sequence

from .models import WILDCARD, TileMultiset
from .matching import can_construct, construct


# Base letter values; a wildcard is worth nothing whatever letter it stands for
LETTER_SCORES: Dict[str, int] = {
    WILDCARD: 0,
    "a": 1, "b": 3, "c": 3, "d": 2, "e": 1, "f": 4, "g": 2,
    "h": 4, "i": 1, "j": 8, "k": 5, "l": 1, "m": 3, "n": 1,
    "o": 1, "p": 3, "q": 10, "r": 1, "s": 1, "t": 1, "u": 1,
    "v": 4, "w": 4, "x": 8, "y": 4, "z": 10,
}


def base_score(tiles_used: Iterable[str]) -> int:
    """Sum the letter values of the tiles used, ignoring board bonuses."""
    return sum(LETTER_SCORES[tile] for tile in tiles_used)


def possible_words(tiles: TileMultiset, words: Sequence[str]) -> List[str]:
    """
    Find every dictionary word that can be built from `tiles`.

    This is a linear scan over the dictionary, O(n * m) for n words of
    average length m. Results keep dictionary order.
    """
    return [word for word in words if can_construct(tiles, word)]


def best_possible_words(tiles: TileMultiset, words: Sequence[str]) -> List[str]:
    """
    Find the constructible word(s) with the highest base score.

    Each candidate is scored on the tiles `construct` assigns to it, so a
    position filled by a wildcard counts 0. All words tied at the maximum
    are returned in the order they were found.

    Args:
        tiles: Available tiles; never modified
        words: The loaded dictionary

    Returns:
        The tied best words, or an empty list if nothing can be built
    """
    suggestions: List[str] = []
    best = -1

    for word in possible_words(tiles, words):
        score = base_score(construct(tiles, word))
        if score > best:
            best = score
            suggestions = [word]
        elif score == best:
            suggestions.append(word)

    return suggestions
