import logging
from typing import Dict, Optional
from pydantic import BaseModel, Field, ConfigDict, ValidationError

from .bag import TileBag
from .store import Store
from ..words.matching import count_tiles
from ..words.models import TileMultiset


log = logging.getLogger(__name__)

RACK_KEY = "rack"
RACK_SIZE = 7


class Rack(BaseModel):
    """
    The tiles a player currently holds.

    Attributes:
        available: Tile symbol -> count; symbols run out are removed
        capacity: Maximum number of tiles held at once
        store: Optional store the rack persists itself to
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    available: Dict[str, int] = Field(default_factory=dict)
    capacity: int = Field(default=RACK_SIZE, ge=1)
    store: Optional[Store] = Field(default=None, exclude=True)

    @classmethod
    def create(cls, store: Optional[Store] = None, capacity: int = RACK_SIZE) -> "Rack":
        """Restore the rack from `store`, or start an empty one."""
        if store is not None and store.has(RACK_KEY):
            try:
                return cls(available=store.get(RACK_KEY), capacity=capacity, store=store)
            except ValidationError as e:
                log.warning("Stored rack is malformed, starting empty: %s", e)

        return cls(capacity=capacity, store=store)

    @property
    def count(self) -> int:
        """Total number of tiles on the rack."""
        return sum(self.available.values())

    def get_available_tiles(self) -> TileMultiset:
        """A copy of the rack's tiles, safe to hand to matching and search."""
        return dict(self.available)

    def remove_tile(self, tile: str) -> bool:
        """
        Remove a single tile from the rack.

        Returns:
            True if the tile was removed, False if the rack has none
        """
        if tile not in self.available:
            return False

        self.available[tile] -= 1
        if self.available[tile] == 0:
            del self.available[tile]
        self._save()
        return True

    def take_from_bag(self, n: int, bag: TileBag) -> None:
        """Draw up to `n` tiles from `bag`, never filling past capacity."""
        n = min(n, self.capacity - self.count)
        if n <= 0:
            return

        for tile, count in count_tiles(bag.draw(n)).items():
            self.available[tile] = self.available.get(tile, 0) + count
        self._save()

    def reset(self) -> None:
        """Empty the rack."""
        self.available = {}
        if self.store is not None:
            self.store.remove(RACK_KEY)

    def _save(self) -> None:
        if self.store is not None:
            self.store.set(RACK_KEY, self.available)
