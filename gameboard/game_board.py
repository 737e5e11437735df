"""
File-backed game board.

Loads a board file (resolved against the configured base directory) and checks
it for a winning run.
"""

import logging
import os
from typing import Optional

from .config import BoardConfig
from .grid_loader import Grid, load, load_file
from .win_detector import WinDetector


logger = logging.getLogger(__name__)


class GameBoard:
    """
    A loaded N x N board and its win detector.

    Attributes:
        path (Optional[str]): Full path of the board file, None for boards built from text
        grid (Grid): The loaded grid
        config (BoardConfig): Settings used to load and check the board
    """

    def __init__(self, filename: Optional[str] = None, config: Optional[BoardConfig] = None,
                 grid: Optional[Grid] = None):
        """
        Load a board file, or wrap an already loaded grid.

        Args:
            filename (Optional[str]): Board file name, relative to config.base_dir unless absolute
            config (Optional[BoardConfig]): Board settings (default: grid.config or BoardConfig())
            grid (Optional[Grid]): A loaded grid to use instead of reading a file

        Raises:
            ValueError: If neither or both of filename and grid are given
            DimensionError: If the file does not describe a square grid
            OSError: If the file cannot be read
        """
        if (filename is None) == (grid is None):
            raise ValueError("Exactly one of filename and grid must be given")

        if grid is None:
            self.config = config or BoardConfig()
            self.path = os.path.join(self.config.base_dir, filename)
            logger.info(f"Loading board from {self.path}")
            grid = load_file(self.path, self.config)
        else:
            self.config = config or grid.config
            self.path = None

        self.grid = grid
        self._detector = WinDetector(grid, self.config)

    @classmethod
    def from_text(cls, raw_text: str, config: Optional[BoardConfig] = None) -> "GameBoard":
        """Build a board from raw text instead of a file."""
        return cls(grid=load(raw_text, config), config=config)

    def check_board(self) -> bool:
        """
        Check the board for 4 pieces of the same color in a row, column, or diagonal.

        Returns:
            bool: True if the board contains a winning run, False otherwise
        """
        return self._detector.check_board()

    @property
    def size(self) -> int:
        return self.grid.size

    def __str__(self) -> str:
        return str(self.grid)

    def __repr__(self) -> str:
        source = self.path if self.path is not None else "<text>"
        return f"GameBoard({source!r}, size={self.size})"
