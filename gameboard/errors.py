"""
Errors raised while loading a game board.
"""

from typing import Optional


class DimensionError(ValueError):
    """
    Raised when a loaded grid is not a perfect N x N square.

    Attributes:
        row (Optional[int]): Index of the first offending row, or None when the input has no rows
        expected (int): Number of tokens every row should have (the row count)
        actual (Optional[int]): Number of tokens found in the offending row
    """

    MESSAGE = "Invalid Grid Dimensions, must be N x N"

    def __init__(self, row: Optional[int] = None, expected: int = 0, actual: Optional[int] = None):
        self.row = row
        self.expected = expected
        self.actual = actual
        if row is None:
            detail = "no rows found"
        else:
            detail = f"row {row} has {actual} tokens, expected {expected}"
        super().__init__(f"{self.MESSAGE} ({detail})")
