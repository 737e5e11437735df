"""
Configuration for loading and checking game boards.
"""

import os
from typing import Optional


BOARDS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "boards")


class BoardConfig:
    """Configuration for board files and win detection."""

    def __init__(self,
                 red_marker: str = "R",
                 black_marker: str = "B",
                 row_delimiter: Optional[str] = None,
                 column_delimiter: str = " ",
                 connect_length: int = 4,
                 strip_trailing_delimiter: bool = True,
                 base_dir: Optional[str] = None):
        # Piece markers; every other character is neutral
        self.red_marker = red_marker
        self.black_marker = black_marker

        # File format. A row delimiter of None splits on any line break
        self.row_delimiter = row_delimiter
        self.column_delimiter = column_delimiter
        self.strip_trailing_delimiter = strip_trailing_delimiter

        # Pieces in a row needed to win
        self.connect_length = connect_length

        # Relative board file names are resolved against this directory
        self.base_dir = base_dir or BOARDS_DIR

        self.validate()

    def validate(self) -> None:
        """
        Check that the settings are usable.

        Raises:
            ValueError: If a marker is not a single character, the markers are equal,
                a delimiter is empty, or the connect length is less than 1
        """
        if len(self.red_marker) != 1 or len(self.black_marker) != 1:
            raise ValueError("Piece markers must be single characters")
        if self.red_marker == self.black_marker:
            raise ValueError("Red and black markers must differ")
        if not self.column_delimiter:
            raise ValueError("Column delimiter cannot be empty")
        if self.row_delimiter is not None and not self.row_delimiter:
            raise ValueError("Row delimiter cannot be empty")
        if self.connect_length < 1:
            raise ValueError("Connect length must be at least 1")

    def __repr__(self) -> str:
        return (f"BoardConfig(red_marker={self.red_marker!r}, black_marker={self.black_marker!r}, "
                f"row_delimiter={self.row_delimiter!r}, column_delimiter={self.column_delimiter!r}, "
                f"connect_length={self.connect_length}, "
                f"strip_trailing_delimiter={self.strip_trailing_delimiter}, base_dir={self.base_dir!r})")

