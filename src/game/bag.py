import logging
import random
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict, ValidationError

from .store import Store
from ..words.models import WILDCARD


log = logging.getLogger(__name__)

BAG_KEY = "bag"

# Standard English Scrabble distribution (100 tiles, 2 blanks)
TILE_DISTRIBUTION: Dict[str, int] = {
    WILDCARD: 2,
    "a": 9, "b": 2, "c": 2, "d": 4, "e": 12, "f": 2, "g": 3,
    "h": 2, "i": 9, "j": 1, "k": 1, "l": 4, "m": 2, "n": 6,
    "o": 8, "p": 2, "q": 1, "r": 6, "s": 4, "t": 6, "u": 4,
    "v": 2, "w": 2, "x": 1, "y": 2, "z": 1,
}


def shuffle(tiles: List[str], rng: random.Random) -> List[str]:
    """Shuffle `tiles` in place (Fisher-Yates) and return it."""
    m = len(tiles)
    while m:
        i = rng.randrange(m)
        m -= 1
        tiles[m], tiles[i] = tiles[i], tiles[m]
    return tiles


class TileBag(BaseModel):
    """
    The shuffled supply of tiles still to be dealt.

    Tiles are drawn from the end of `tiles`. The bag only shrinks until
    `reset()` refills it.

    Attributes:
        tiles: Remaining tiles in draw order (last drawn first)
        seed: Optional random seed for reproducible shuffles
        store: Optional store the bag persists itself to
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    tiles: List[str] = Field(default_factory=list)
    seed: Optional[int] = None
    store: Optional[Store] = Field(default=None, exclude=True)
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def create(cls, store: Optional[Store] = None, seed: Optional[int] = None) -> "TileBag":
        """
        Restore the bag from `store`, or start a freshly shuffled one.

        Args:
            store: Optional state store; the bag is read from and saved to it
            seed: Optional random seed for reproducibility

        Returns:
            A TileBag ready to draw from
        """
        if store is not None and store.has(BAG_KEY):
            try:
                return cls(tiles=store.get(BAG_KEY), seed=seed, store=store)
            except ValidationError as e:
                log.warning("Stored bag is malformed, dealing a new one: %s", e)

        bag = cls(seed=seed, store=store)
        bag.reset()
        return bag

    @property
    def tiles_remaining(self) -> int:
        """Number of tiles left in the bag."""
        return len(self.tiles)

    def draw(self, n: int) -> List[str]:
        """
        Remove up to `n` tiles from the bag and return them.

        Draws whatever is left when fewer than `n` tiles remain, and nothing
        from an empty bag.
        """
        drawn = []
        while len(drawn) < n and self.tiles:
            drawn.append(self.tiles.pop())
        self._save()
        return drawn

    def reset(self) -> None:
        """Refill the bag with the full distribution in a new random order."""
        tiles = []
        for letter, count in TILE_DISTRIBUTION.items():
            tiles.extend([letter] * count)
        self.tiles = shuffle(tiles, self._rng)
        if self.store is not None:
            self.store.remove(BAG_KEY)
        self._save()

    def _save(self) -> None:
        if self.store is not None:
            self.store.set(BAG_KEY, self.tiles)
