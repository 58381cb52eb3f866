"""
Tests for board placement.

Covers:
- Bounds in both axes and both orientations
- Occupied cells are never overwritten
- play_at is atomic and delegates scoring
- Persistence and rendering
"""

from copy import deepcopy
from unittest.mock import Mock

import pytest
from src.game import Board, Position, ScoringOracle, BaseScoring, MemoryStore, INVALID_PLACEMENT


@pytest.fixture
def board():
    return Board.create()


class TestCanPlace:
    """Test cases for placement validation."""

    def test_empty_board(self, board):
        """A new board is 15x15 and empty."""
        assert board.size == 15
        assert board.cell(Position(1, 1)) is None
        assert board.cell(Position(15, 15)) is None

    @pytest.mark.parametrize("horizontal", [True, False])
    def test_fits_in_bounds(self, board, horizontal):
        """A word inside the grid fits either way."""
        assert board.can_place("cat", Position(1, 1), horizontal) is True
        assert board.can_place("cat", Position(13, 13), horizontal) is True

    @pytest.mark.parametrize("position", [
        Position(0, 1), Position(1, 0), Position(16, 1), Position(1, 16), Position(-3, 5),
    ])
    @pytest.mark.parametrize("horizontal", [True, False])
    def test_start_out_of_bounds(self, board, position, horizontal):
        """A word starting off the grid is rejected."""
        assert board.can_place("cat", position, horizontal) is False

    def test_runs_off_the_right_edge(self, board):
        """A horizontal word may not extend past column 15."""
        assert board.can_place("cat", Position(14, 1), True) is False
        assert board.can_place("cat", Position(14, 1), False) is True

    def test_runs_off_the_bottom_edge(self, board):
        """A vertical word may not extend past row 15."""
        assert board.can_place("cat", Position(1, 14), False) is False
        assert board.can_place("cat", Position(1, 14), True) is True

    @pytest.mark.parametrize("horizontal", [True, False])
    def test_overlap_rejected(self, board, horizontal):
        """A word crossing an occupied cell is rejected."""
        board.place("dog", Position(5, 5), True)
        assert board.can_place("cat", Position(6, 4), False) is False
        assert board.can_place("cat", Position(3, 5), True) is False
        assert board.can_place("cat", Position(5, 6), horizontal) is True

    def test_overlap_rejected_even_when_letters_match(self, board):
        """Building on an existing matching letter is not supported."""
        board.place("cat", Position(1, 1), True)
        assert board.can_place("tea", Position(3, 1), False) is False

    def test_empty_word(self, board):
        """An empty word cannot be placed."""
        assert board.can_place("", Position(1, 1), True) is False


class TestPlace:
    """Test cases for writing words onto the board."""

    def test_horizontal_runs_along_x(self, board):
        """A horizontal word fills consecutive columns."""
        board.place("cat", Position(3, 5), True)
        assert [board.cell(Position(x, 5)) for x in (3, 4, 5)] == ["c", "a", "t"]
        assert board.cell(Position(3, 6)) is None

    def test_vertical_runs_along_y(self, board):
        """A vertical word fills consecutive rows."""
        board.place("cat", Position(3, 5), False)
        assert [board.cell(Position(3, y)) for y in (5, 6, 7)] == ["c", "a", "t"]
        assert board.cell(Position(4, 5)) is None

    def test_invalid_placement_raises(self, board):
        """place() refuses to write an invalid placement."""
        with pytest.raises(ValueError):
            board.place("cat", Position(14, 1), True)

    def test_reset_clears(self, board):
        """reset() empties every cell."""
        board.place("cat", Position(1, 1), True)
        board.reset()
        assert board.cell(Position(1, 1)) is None


class TestPlayAt:
    """Test cases for the validate-place-score operation."""

    def test_invalid_returns_sentinel_without_change(self, board):
        """An invalid placement returns -1 and leaves the board as it was."""
        board.place("dog", Position(1, 1), True)
        before = deepcopy(board.grid)

        assert board.play_at("cat", Position(3, 1), False) == INVALID_PLACEMENT
        assert board.play_at("cat", Position(15, 15), True) == -1
        assert board.grid == before

    def test_delegates_scoring(self):
        """A valid placement is scored by the scoring oracle."""
        scoring = Mock(spec=ScoringOracle)
        scoring.score.return_value = 12
        board = Board.create(scoring=scoring)

        assert board.play_at("cat", Position(2, 2), True) == 12
        scoring.score.assert_called_once_with("cat", Position(2, 2), True)
        assert board.cell(Position(4, 2)) == "t"

    def test_default_scoring(self, board):
        """Without an oracle, words score their base letter values."""
        assert board.play_at("quiz", Position(1, 1), True) == 22


class TestPersistence:
    """Test cases for saving and restoring the grid."""

    def test_restores_placed_words(self):
        """A board created from the same store sees earlier placements."""
        store = MemoryStore()
        Board.create(store=store).play_at("cat", Position(4, 4), False)

        restored = Board.create(store=store)

        assert restored.cell(Position(4, 6)) == "t"

    def test_malformed_grid_starts_empty(self):
        """A stored grid of the wrong size is replaced by an empty board."""
        store = MemoryStore()
        store.set("grid", [[None]])

        board = Board.create(store=store)

        assert len(board.grid) == 15
        assert len(store.get("grid")) == 15


class TestRender:
    """Test cases for the text rendering."""

    def test_empty_board(self, board):
        """Empty cells render as dots."""
        lines = board.render().split("\n")
        assert len(lines) == 15
        assert lines[0] == "." * 15

    def test_placed_word(self, board):
        """Placed tiles render as their letters."""
        board.place("cat", Position(1, 1), True)
        assert board.render().split("\n")[0] == "cat" + "." * 12

    def test_special_cells(self):
        """Empty cells the oracle labels render as '+'."""
        class CenterStar(BaseScoring):
            def label(self, x, y):
                return "double-word" if (x, y) == (8, 8) else ""

        board = Board.create(scoring=CenterStar())
        assert board.render().split("\n")[7] == "." * 7 + "+" + "." * 7
