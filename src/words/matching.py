"""Tile multiset matching: can a word be spelled from a set of tiles?"""

from typing import Iterable, Optional

from .models import WILDCARD, TileMultiset, WordAssignment


def count_tiles(tiles: Iterable[str]) -> TileMultiset:
    """Build a tile multiset from a sequence of tile symbols."""
    counts: TileMultiset = {}
    for tile in tiles:
        counts[tile] = counts.get(tile, 0) + 1
    return counts


def _take(available: TileMultiset, tile: str) -> None:
    available[tile] -= 1
    if available[tile] == 0:
        del available[tile]


def construct(tiles: TileMultiset, word: str) -> Optional[WordAssignment]:
    """
    Spell `word` from `tiles`, returning the tiles consumed per position.

    Each letter uses a matching letter tile when one is left and falls back
    to a wildcard otherwise. The choice is greedy per position: a letter
    tile is always preferred, even when wildcards are plentiful.

    Args:
        tiles: Available tiles; never modified
        word: Lowercase word without wildcards

    Returns:
        The letters/wildcards used, or None if the word cannot be spelled
    """
    available = {tile: count for tile, count in tiles.items() if count > 0}
    used: WordAssignment = []

    for letter in word:
        if letter in available:
            used.append(letter)
            _take(available, letter)
        elif WILDCARD in available:
            used.append(WILDCARD)
            _take(available, WILDCARD)
        else:
            return None

    return used


def can_construct(tiles: TileMultiset, word: str) -> bool:
    """Check whether `word` can be spelled from `tiles` without modifying them."""
    return construct(tiles, word) is not None
