"""
Game session: ties the bag, board, rack and dictionary into turns.

A turn checks, in order, that the word can be spelled from the rack, that
it is a dictionary word, and that it fits on the board. Only then is the
board written, the used tiles taken off the rack and the rack refilled.
"""

import logging
import random
from typing import AbstractSet, Any, Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, Field, ConfigDict

from .bag import TileBag
from .board import Board, Position, ScoringOracle, INVALID_PLACEMENT
from .rack import Rack
from .store import Store, MemoryStore, JsonFileStore
from .models import GameConfig, PlayResult, HintResult
from ..words import DictionaryLoader, construct, is_valid, best_possible_words


log = logging.getLogger(__name__)


class GameSession(BaseModel):
    """
    A single player's game: one bag, one board, one rack.

    Attributes:
        config: Session configuration
        bag: Tiles still to be dealt
        board: The grid of placed words
        rack: The player's tiles
        loader: Shared dictionary loader
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    bag: TileBag
    board: Board
    rack: Rack
    loader: DictionaryLoader
    _rng: random.Random = None
    _lookup: Optional[AbstractSet[str]] = None
    _lookup_words: Optional[List[str]] = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator used to pick hints."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        store: Optional[Store] = None,
        loader: Optional[DictionaryLoader] = None,
        scoring: Optional[ScoringOracle] = None,
        **config_kwargs: Any
    ) -> "GameSession":
        """
        Factory method to create or restore a session.

        State is restored from `store` where present; otherwise a fresh bag
        and empty board are created. The rack is filled up to capacity.

        Args:
            config: Optional GameConfig instance
            store: State store (defaults to the config's state file, or memory)
            loader: Dictionary loader (defaults to one for config.dictionary)
            scoring: Scoring oracle for the board
            **config_kwargs: Config parameters if config not provided

        Returns:
            A GameSession ready to play
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if store is None:
            store = JsonFileStore(config.state_file) if config.state_file else MemoryStore()

        bag = TileBag.create(store=store, seed=config.seed)
        board = Board.create(store=store, size=config.board_size, scoring=scoring)
        rack = Rack.create(store=store, capacity=config.rack_size)
        rack.take_from_bag(rack.capacity, bag)

        return cls(
            config=config,
            bag=bag,
            board=board,
            rack=rack,
            loader=loader or DictionaryLoader(config.dictionary),
        )

    def _words_lookup(self, words: List[str]) -> AbstractSet[str]:
        if self._lookup_words is not words:
            self._lookup = frozenset(words)
            self._lookup_words = words
        return self._lookup

    async def play(
        self,
        word: str,
        position: Union[Position, Tuple[int, int]],
        horizontal: bool = True
    ) -> PlayResult:
        """
        Try to play `word` from the rack at `position`.

        Args:
            word: The word to play
            position: 1-indexed (x, y) of the first letter
            horizontal: True to run along x, False to run along y

        Returns:
            PlayResult with code PLAYED and the score, or the reason the
            play was refused (in which case nothing changed)
        """
        word = word.lower()
        position = Position(*position)
        direction = "horizontal" if horizontal else "vertical"

        tiles_used = construct(self.rack.get_available_tiles(), word)
        if tiles_used is None:
            return PlayResult(
                code="UNCONSTRUCTIBLE",
                message=f"The word '{word}' cannot be constructed from the available tiles.",
                word=word,
            )

        result = await self.loader.load()
        if not result.ok:
            return PlayResult(
                code="DICTIONARY_UNAVAILABLE",
                message=f"The dictionary could not be loaded: {result.error}",
                word=word,
            )

        if not is_valid(word, self._words_lookup(result.data)):
            return PlayResult(
                code="INVALID_WORD",
                message=f"'{word}' is not a valid word.",
                word=word,
            )

        score = self.board.play_at(word, position, horizontal)
        if score == INVALID_PLACEMENT:
            return PlayResult(
                code="INVALID_PLACEMENT",
                message=(
                    f"The word cannot be placed in a {direction} position "
                    f"at ({position.x}, {position.y})."
                ),
                word=word,
            )

        for tile in tiles_used:
            self.rack.remove_tile(tile)
        self.rack.take_from_bag(len(tiles_used), self.bag)

        log.info("Played '%s' %s at (%d, %d) for %d", word, direction, position.x, position.y, score)
        return PlayResult(
            code="PLAYED",
            message=f"Played '{word}' for {score} points.",
            word=word,
            score=score,
            tiles_used=tiles_used,
        )

    async def hint(self) -> HintResult:
        """
        Suggest one of the best-scoring words the rack can spell.

        Returns:
            HintResult with all tied candidates and a random pick among them;
            `hint` is None when the rack spells nothing
        """
        result = await self.loader.load()
        if not result.ok:
            return HintResult(error=result.error)

        candidates = best_possible_words(self.rack.get_available_tiles(), result.data)
        hint = self._rng.choice(candidates) if candidates else None
        log.info("Hint: %s (%d candidates)", hint, len(candidates))
        return HintResult(hint=hint, candidates=candidates)

    def reset(self) -> None:
        """Start over: refill the bag, clear the board and deal a new rack."""
        self.bag.reset()
        self.board.reset()
        self.rack.reset()
        self.rack.take_from_bag(self.rack.capacity, self.bag)

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Returns:
            Dictionary containing session state
        """
        return {
            "tiles_remaining": self.bag.tiles_remaining,
            "rack": dict(sorted(self.rack.available.items())),
            "rack_count": self.rack.count,
            "board": self.board.render(),
            "dictionary_loaded": self.loader.loaded(),
        }
