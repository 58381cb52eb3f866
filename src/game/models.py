"""
Pydantic models for the game layer.

Configuration and turn outcomes. The stateful classes (TileBag, Board,
Rack, GameSession) live in their own modules.
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field

from ..words.loader import DEFAULT_DICTIONARY


PlayCode = Literal[
    "PLAYED",
    "UNCONSTRUCTIBLE",
    "DICTIONARY_UNAVAILABLE",
    "INVALID_WORD",
    "INVALID_PLACEMENT",
]


class GameConfig(BaseModel):
    """Configuration for a game session."""
    dictionary: str = str(DEFAULT_DICTIONARY)
    state_file: Optional[str] = None  # JSON state file; in-memory state if unset
    board_size: int = Field(default=15, ge=1)
    rack_size: int = Field(default=7, ge=1)
    seed: Optional[int] = None


class PlayResult(BaseModel):
    """Outcome of trying to play a word."""
    code: PlayCode
    message: str
    word: str
    score: Optional[int] = None
    tiles_used: List[str] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.code == "PLAYED"


class HintResult(BaseModel):
    """Best-scoring words for the current rack, and the one suggested."""
    hint: Optional[str] = None
    candidates: List[str] = Field(default_factory=list)
    error: Optional[str] = None
