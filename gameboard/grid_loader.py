"""
Grid loading and validation.

A board file holds one row per line, with the single-character cells of a row
separated by a space. The grid must be square: N rows of N tokens each.
"""

import logging
import re
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .config import BoardConfig
from .errors import DimensionError


logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\n|\r")

_DEFAULT_CONFIG = BoardConfig()


def is_red(token: str, config: Optional[BoardConfig] = None) -> bool:
    config = config or _DEFAULT_CONFIG
    return token == config.red_marker


def is_black(token: str, config: Optional[BoardConfig] = None) -> bool:
    config = config or _DEFAULT_CONFIG
    return token == config.black_marker


class Token(Enum):
    """Enumeration for cell contents."""
    EMPTY = 0
    RED = 1
    BLACK = 2

    @classmethod
    def classify(cls, token: str, config: Optional[BoardConfig] = None) -> "Token":
        """Map a raw cell character to a token; unrecognized characters are EMPTY."""
        if is_red(token, config):
            return cls.RED
        if is_black(token, config):
            return cls.BLACK
        return cls.EMPTY


class Grid:
    """
    An immutable N x N matrix of board tokens.

    The raw cell strings are kept as loaded. A read-only int8 array of
    Token values mirrors them for the scanning code.

    Attributes:
        size (int): Number of rows (and of columns)
        rows (Tuple[Tuple[str, ...], ...]): The raw tokens, row by row
        codes (np.ndarray): Token values, shape (size, size), not writeable
    """

    def __init__(self, rows: Sequence[Sequence[str]], config: Optional[BoardConfig] = None):
        config = config or BoardConfig()
        self.config = config
        self.rows = tuple(tuple(row) for row in rows)
        _check_square(self.rows)
        self.size = len(self.rows)

        codes = np.zeros((self.size, self.size), dtype=np.int8)
        for r, row in enumerate(self.rows):
            for c, token in enumerate(row):
                codes[r, c] = Token.classify(token, config).value
        codes.flags.writeable = False
        self.codes = codes

    def row(self, index: int) -> Tuple[str, ...]:
        return self.rows[index]

    def column(self, index: int) -> Tuple[str, ...]:
        return tuple(row[index] for row in self.rows)

    def token_at(self, row: int, col: int) -> Token:
        return Token(int(self.codes[row, col]))

    def __getitem__(self, position: Tuple[int, int]) -> str:
        row, col = position
        return self.rows[row][col]

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Tuple[str, ...]]:
        return iter(self.rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.rows == other.rows

    def __hash__(self) -> int:
        return hash(self.rows)

    def __str__(self) -> str:
        row_delimiter = self.config.row_delimiter or "\n"
        return row_delimiter.join(self.config.column_delimiter.join(row) for row in self.rows)

    def __repr__(self) -> str:
        return f"Grid(size={self.size})"


def _check_square(rows: Sequence[Sequence[str]]) -> None:
    expected = len(rows)
    if expected == 0:
        raise DimensionError(expected=0)
    for index, row in enumerate(rows):
        if len(row) != expected:
            logger.warning(f"Row {index} has {len(row)} tokens, expected {expected}")
            raise DimensionError(row=index, expected=expected, actual=len(row))


def _split_rows(raw_text: str, config: BoardConfig) -> List[str]:
    if config.row_delimiter is None:
        lines = _LINE_BREAK.split(raw_text)
    else:
        lines = raw_text.split(config.row_delimiter)

    # A final row delimiter leaves one empty string behind
    if config.strip_trailing_delimiter and len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def load(raw_text: str, config: Optional[BoardConfig] = None) -> Grid:
    """
    Parse raw board text into a validated square grid.

    Args:
        raw_text (str): Rows separated by the row delimiter, cells by the column delimiter
        config (Optional[BoardConfig]): Format settings (default: BoardConfig())

    Returns:
        Grid: The loaded grid

    Raises:
        DimensionError: If the text has no rows, or some row's token count differs
            from the number of rows
    """
    config = config or BoardConfig()

    lines = _split_rows(raw_text, config)
    if lines == [""]:
        logger.warning("Board text is empty")
        raise DimensionError(expected=0)

    grid = Grid([line.split(config.column_delimiter) for line in lines], config)
    logger.debug(f"Loaded {grid.size}x{grid.size} grid")
    return grid


def load_file(path: str, config: Optional[BoardConfig] = None) -> Grid:
    """
    Read a board file and load it.

    Args:
        path (str): Path of the board file
        config (Optional[BoardConfig]): Format settings (default: BoardConfig())

    Returns:
        Grid: The loaded grid

    Raises:
        DimensionError: If the file does not describe a square grid
        OSError: If the file cannot be read
    """
    # newline="" keeps "\r\n" intact for an explicit row delimiter
    with open(path, "r", encoding="utf-8", newline="") as f:
        raw_text = f.read()
    logger.debug(f"Read {len(raw_text)} characters from {path}")
    return load(raw_text, config)
