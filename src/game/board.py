"""Board state: the grid of placed tiles and word placement."""

import logging
from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional
from pydantic import BaseModel, Field, ConfigDict, ValidationError, model_validator

from .store import Store
from ..words.search import base_score


log = logging.getLogger(__name__)

GRID_KEY = "grid"
BOARD_SIZE = 15
INVALID_PLACEMENT = -1

Grid = List[List[Optional[str]]]


class Position(NamedTuple):
    """A 1-indexed board cell: x is the column, y the row."""
    x: int
    y: int


class ScoringOracle(ABC):
    """Computes placement scores and names special cells for the board."""

    @abstractmethod
    def score(self, word: str, position: Position, horizontal: bool) -> int:
        """Points for `word` placed at `position`, including cell bonuses."""

    @abstractmethod
    def label(self, x: int, y: int) -> str:
        """Name of the special cell at (x, y), e.g. "double-word", or "" for a plain cell."""


class BaseScoring(ScoringOracle):
    """
    Scores words at their base letter value; the board has no special cells.

    Only the word text reaches the oracle, so a letter played from a wildcard
    is scored at its normal value here rather than 0.
    """

    def score(self, word: str, position: Position, horizontal: bool) -> int:
        return base_score(word)

    def label(self, x: int, y: int) -> str:
        return ""


def empty_grid(size: int) -> Grid:
    return [[None] * size for _ in range(size)]


class Board(BaseModel):
    """
    Square grid of placed tiles.

    Cells are addressed with 1-indexed `Position`s. Horizontal words run
    along x, vertical words along y. A placement either writes every letter
    or nothing, and never covers an occupied cell.

    Attributes:
        size: Width and height of the grid
        grid: Rows of cells, `grid[y - 1][x - 1]`; None for an empty cell
        scoring: Oracle used to score placed words
        store: Optional store the grid persists itself to
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    size: int = Field(default=BOARD_SIZE, ge=1)
    grid: Grid = Field(default_factory=list)
    scoring: ScoringOracle = Field(default_factory=BaseScoring, exclude=True)
    store: Optional[Store] = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def check_grid_shape(self) -> "Board":
        if not self.grid:
            self.grid = empty_grid(self.size)
        if len(self.grid) != self.size or any(len(row) != self.size for row in self.grid):
            raise ValueError(f"grid must be {self.size}x{self.size}")
        return self

    @classmethod
    def create(
        cls,
        store: Optional[Store] = None,
        size: int = BOARD_SIZE,
        scoring: Optional[ScoringOracle] = None,
    ) -> "Board":
        """
        Restore the board from `store`, or start an empty one.

        Args:
            store: Optional state store; the grid is read from and saved to it
            size: Grid width and height
            scoring: Scoring oracle (defaults to BaseScoring)

        Returns:
            A Board instance
        """
        scoring = scoring or BaseScoring()
        if store is not None and store.has(GRID_KEY):
            try:
                return cls(size=size, grid=store.get(GRID_KEY), scoring=scoring, store=store)
            except ValidationError as e:
                log.warning("Stored grid is malformed, starting an empty board: %s", e)

        board = cls(size=size, scoring=scoring, store=store)
        board._save()
        return board

    def cell(self, position: Position) -> Optional[str]:
        """Tile at `position`, or None if the cell is empty."""
        return self.grid[position.y - 1][position.x - 1]

    def _cells(self, word: str, position: Position, horizontal: bool) -> List[Position]:
        if horizontal:
            return [Position(position.x + i, position.y) for i in range(len(word))]
        return [Position(position.x, position.y + i) for i in range(len(word))]

    def _in_bounds(self, position: Position) -> bool:
        return 1 <= position.x <= self.size and 1 <= position.y <= self.size

    def can_place(self, word: str, position: Position, horizontal: bool) -> bool:
        """
        Check whether `word` fits at `position` in the given orientation.

        Every cell the word would cover must be on the board and empty;
        placing over an existing tile is rejected even if the letters match.
        """
        if not word:
            return False

        return all(
            self._in_bounds(cell) and self.cell(cell) is None
            for cell in self._cells(word, position, horizontal)
        )

    def place(self, word: str, position: Position, horizontal: bool) -> None:
        """
        Write `word` onto the board. Only call after `can_place` succeeds.

        Raises:
            ValueError: If the placement is not valid
        """
        if not self.can_place(word, position, horizontal):
            raise ValueError(f"'{word}' cannot be placed at {tuple(position)}")

        for letter, cell in zip(word, self._cells(word, position, horizontal)):
            self.grid[cell.y - 1][cell.x - 1] = letter
        self._save()

    def play_at(self, word: str, position: Position, horizontal: bool) -> int:
        """
        Place `word` and score it.

        Returns:
            The score from the scoring oracle, or -1 (board unchanged) if the
            word cannot be placed there
        """
        if not self.can_place(word, position, horizontal):
            return INVALID_PLACEMENT

        self.place(word, position, horizontal)
        return self.scoring.score(word, position, horizontal)

    def reset(self) -> None:
        """Clear every cell."""
        self.grid = empty_grid(self.size)
        if self.store is not None:
            self.store.remove(GRID_KEY)
        self._save()

    def render(self) -> str:
        """Render the board as text: '.' for an empty cell, '+' for an empty special cell."""
        lines = []
        for y in range(1, self.size + 1):
            row = []
            for x in range(1, self.size + 1):
                tile = self.cell(Position(x, y))
                if tile is not None:
                    row.append(tile)
                else:
                    row.append('+' if self.scoring.label(x, y) else '.')
            lines.append(''.join(row))
        return '\n'.join(lines)

    def _save(self) -> None:
        if self.store is not None:
            self.store.set(GRID_KEY, self.grid)
