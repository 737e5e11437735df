#!/usr/bin/env python3
"""
Example usage of the game board checker.

This script loads the sample boards shipped with the package, checks each one
for four in a row, and shows how malformed boards and custom settings behave.
"""

import logging

from gameboard import BoardConfig, DimensionError, GameBoard, WinDetector, load


SAMPLE_BOARDS = [
    "horizontal.txt",
    "vertical.txt",
    "diagonalBackSlash.txt",
    "diagonalForwardSlash.txt",
    "checkShouldFail.txt",
]


def example_sample_boards():
    """Check every bundled sample board."""
    print("=== Sample Boards ===")

    for filename in SAMPLE_BOARDS:
        board = GameBoard(filename)
        print(f"{filename}:")
        print(board)
        print(f"Four in a row: {board.check_board()}")
        print()
    print("=" * 50 + "\n")


def example_directions():
    """Show which scan direction finds the win."""
    print("=== Scan Directions ===")

    grid = load(". . . R\n. . R .\n. R . .\nR . . .")
    detector = WinDetector(grid)
    print(grid)
    print(f"Horizontal:    {detector.check_horizontal()}")
    print(f"Vertical:      {detector.check_vertical()}")
    print(f"Back slash:    {detector.check_back_slash()}")
    print(f"Forward slash: {detector.check_forward_slash()}")
    print("\n" + "=" * 50 + "\n")


def example_malformed_board():
    """Demonstrate rejection of a board that is not square."""
    print("=== Malformed Board ===")

    try:
        GameBoard("malformed.txt")
    except DimensionError as e:
        print(f"Rejected: {e}")
    print("\n" + "=" * 50 + "\n")


def example_custom_config():
    """Demonstrate other markers and a shorter run length."""
    print("=== Custom Settings (X/O markers, connect-3) ===")

    config = BoardConfig(red_marker="X", black_marker="O", connect_length=3)
    board = GameBoard.from_text("X O .\nX O .\nX . .", config)
    print(board)
    print(f"Three in a row: {board.check_board()}")


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    print("Game Board Checker Examples")
    print("=" * 50)
    print()

    example_sample_boards()
    example_directions()
    example_malformed_board()
    example_custom_config()


if __name__ == "__main__":
    main()
