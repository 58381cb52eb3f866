"""Game state for the tile word game: bag, board, rack and sessions."""

from .models import GameConfig, PlayResult, HintResult
from .store import Store, MemoryStore, JsonFileStore
from .bag import TileBag, TILE_DISTRIBUTION, shuffle
from .board import Board, Position, ScoringOracle, BaseScoring, BOARD_SIZE, INVALID_PLACEMENT
from .rack import Rack, RACK_SIZE
from .session import GameSession

__all__ = [
    "GameConfig",
    "PlayResult",
    "HintResult",
    "Store",
    "MemoryStore",
    "JsonFileStore",
    "TileBag",
    "TILE_DISTRIBUTION",
    "shuffle",
    "Board",
    "Position",
    "ScoringOracle",
    "BaseScoring",
    "BOARD_SIZE",
    "INVALID_PLACEMENT",
    "Rack",
    "RACK_SIZE",
    "GameSession",
]
