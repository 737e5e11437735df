"""
Test suite for file-backed game boards, using the sample boards shipped in
gameboard/boards.
"""

import os

import pytest

from gameboard import BoardConfig, DimensionError, GameBoard
from gameboard.config import BOARDS_DIR
from gameboard.grid_loader import load


class TestBundledBoards:
    """Test checkBoard on the sample board files."""

    @pytest.mark.parametrize("filename, expected", [
        ("horizontal.txt", True),
        ("vertical.txt", True),
        ("diagonalBackSlash.txt", True),
        ("diagonalForwardSlash.txt", True),
        ("checkShouldFail.txt", False),
    ])
    def test_check_board(self, filename, expected):
        board = GameBoard(filename)
        assert board.check_board() is expected
        assert board.size == 4
        assert board.path == os.path.join(BOARDS_DIR, filename)

    def test_malformed_board(self):
        """Test that a 3x4 board aborts construction."""
        with pytest.raises(DimensionError):
            GameBoard("malformed.txt")

    def test_missing_board(self):
        with pytest.raises(FileNotFoundError):
            GameBoard("no_such_board.txt")


class TestBoardSources:
    """Test where boards are loaded from."""

    def test_custom_base_dir(self, tmp_path):
        (tmp_path / "mine.txt").write_text(". B\nB .\n", encoding="utf-8")
        board = GameBoard("mine.txt", BoardConfig(base_dir=str(tmp_path)))
        assert board.check_board() is False
        assert board.grid[0, 1] == 'B'

    def test_absolute_path(self, tmp_path):
        path = tmp_path / "abs.txt"
        path.write_text("R R R R\n. . . .\n. . . .\n. . . .", encoding="utf-8")
        board = GameBoard(str(path))
        assert board.path == str(path)
        assert board.check_board() is True

    def test_from_text(self):
        board = GameBoard.from_text("B . . .\nB . . .\nB . . .\nB . . .")
        assert board.path is None
        assert board.check_board() is True

    def test_from_text_malformed(self):
        with pytest.raises(DimensionError):
            GameBoard.from_text("R R\nB B\n\n")


class TestBoardFromGrid:
    """Test wrapping an already loaded grid."""

    def test_from_grid(self):
        grid = load("R . . .\n. R . .\n. . R .\n. . . R")
        board = GameBoard(grid=grid)
        assert board.grid is grid
        assert board.path is None
        assert board.config is grid.config
        assert board.check_board() is True

    def test_filename_or_grid_required(self):
        with pytest.raises(ValueError):
            GameBoard()
        with pytest.raises(ValueError):
            GameBoard("horizontal.txt", grid=load("R"))

    def test_from_text_uses_constructor(self):
        """Test that text boards carry the config they were loaded with."""
        config = BoardConfig(red_marker="X", black_marker="O", connect_length=3)
        board = GameBoard.from_text("X O .\nX O .\nX . .", config)
        assert board.config is config
        assert board.grid.config is config
        assert board.check_board() is True


class TestBoardRepresentation:
    """Test board rendering."""

    def test_string_representation(self):
        board = GameBoard("diagonalForwardSlash.txt")
        assert str(board) == ". . . R\n. . R .\n. R . .\nR . . ."

    def test_repr(self):
        board = GameBoard.from_text("R .\n. B")
        assert repr(board) == "GameBoard('<text>', size=2)"
