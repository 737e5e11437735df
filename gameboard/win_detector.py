"""
Win detection for a loaded board.

A board is won when one color has connect_length (default 4) pieces in a row
horizontally, vertically, or along either diagonal. Every direction is reduced
to a list of token sequences, and each sequence goes through the same run scan.
"""

import logging
from typing import Iterator, Optional, Sequence

import numpy as np
from numba import jit

from .config import BoardConfig
from .grid_loader import Grid, Token


logger = logging.getLogger(__name__)

RED = Token.RED.value
BLACK = Token.BLACK.value


@jit(nopython=True, cache=True)
def is_four(red_run: int, black_run: int, connect_length: int = 4) -> bool:
    """True if either run has reached the winning length."""
    return red_run >= connect_length or black_run >= connect_length


@jit(nopython=True, cache=True)
def _jit_run_scan(sequence: np.ndarray, red: int, black: int, connect_length: int) -> bool:
    """
    JIT-compiled scan of one line of token codes for a winning run.

    Args:
        sequence: 1-D array of token codes
        red: Code of a red piece
        black: Code of a black piece
        connect_length: Number of pieces needed to win

    Returns:
        bool: True as soon as either color has connect_length consecutive pieces
    """
    red_run = 0
    black_run = 0
    for i in range(sequence.shape[0]):
        token = sequence[i]
        if token == red:
            red_run += 1
            black_run = 0
        elif token == black:
            black_run += 1
            red_run = 0
        else:
            red_run = 0
            black_run = 0
        if is_four(red_run, black_run, connect_length):
            return True
    return False


def run_scan(sequence: Sequence[int], connect_length: int = 4) -> bool:
    """
    Check a sequence of token codes for connect_length consecutive pieces of one color.

    Args:
        sequence: Token codes (Token.value) in board order
        connect_length (int): Number of pieces needed to win (default: 4)

    Returns:
        bool: True if a winning run exists, False otherwise
    """
    codes = np.array(sequence, dtype=np.int8)
    return bool(_jit_run_scan(codes, RED, BLACK, connect_length))


class WinDetector:
    """
    Read-only scanner for four (or connect_length) in a row.

    Attributes:
        grid (Grid): The board to scan
        connect_length (int): Number of pieces needed to win
    """

    def __init__(self, grid: Grid, config: Optional[BoardConfig] = None):
        """
        Initialize a detector for a loaded grid.

        Args:
            grid (Grid): The board to scan
            config (Optional[BoardConfig]): Settings overriding connect_length (default: grid.config)

        Raises:
            ValueError: If config reads pieces differently from the config the grid was loaded with
        """
        if config is not None and (config.red_marker, config.black_marker) != (
                grid.config.red_marker, grid.config.black_marker):
            raise ValueError("Config markers differ from the markers the grid was loaded with")
        self.config = config or grid.config
        self.grid = grid
        self.connect_length = self.config.connect_length

    def _any_run(self, sequences: Iterator[np.ndarray]) -> bool:
        for sequence in sequences:
            if run_scan(sequence, self.connect_length):
                return True
        return False

    def _rows(self) -> Iterator[np.ndarray]:
        for r in range(self.grid.size):
            yield self.grid.codes[r, :]

    def _columns(self) -> Iterator[np.ndarray]:
        for c in range(self.grid.size):
            yield self.grid.codes[:, c]

    def _diagonal_offsets(self) -> range:
        # Only diagonals at least connect_length long can hold a win
        reach = self.grid.size - self.connect_length
        return range(-reach, reach + 1)

    def _back_diagonals(self) -> Iterator[np.ndarray]:
        # row - col is constant along each diagonal
        for offset in self._diagonal_offsets():
            yield np.diagonal(self.grid.codes, offset=offset)

    def _forward_diagonals(self) -> Iterator[np.ndarray]:
        # row + col is constant; flipping the columns turns them into back diagonals
        flipped = np.fliplr(self.grid.codes)
        for offset in self._diagonal_offsets():
            yield np.diagonal(flipped, offset=offset)

    def check_horizontal(self) -> bool:
        return self._any_run(self._rows())

    def check_vertical(self) -> bool:
        return self._any_run(self._columns())

    def check_back_slash(self) -> bool:
        """Check diagonals running top-left to bottom-right."""
        return self._any_run(self._back_diagonals())

    def check_forward_slash(self) -> bool:
        """Check diagonals running bottom-left to top-right."""
        return self._any_run(self._forward_diagonals())

    def check_diagonal(self) -> bool:
        return self.check_back_slash() or self.check_forward_slash()

    def check_board(self) -> bool:
        """
        Check the board for connect_length pieces of the same color in a row,
        column, or diagonal.

        Returns:
            bool: True if the board contains a winning run, False otherwise
        """
        if self.check_horizontal():
            logger.debug("Winning run found in a row")
            return True
        if self.check_vertical():
            logger.debug("Winning run found in a column")
            return True
        if self.check_diagonal():
            logger.debug("Winning run found on a diagonal")
            return True
        return False


def check_board(grid: Grid, config: Optional[BoardConfig] = None) -> bool:
    """Shortcut for WinDetector(grid, config).check_board()."""
    return WinDetector(grid, config).check_board()
