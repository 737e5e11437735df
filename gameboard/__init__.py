"""
Game Board Package

Loads square boards of red and black pieces and checks them for four in a row.
"""

from .config import BoardConfig
from .errors import DimensionError
from .grid_loader import Grid, Token, load, load_file
from .win_detector import WinDetector, check_board, run_scan
from .game_board import GameBoard

__all__ = ['BoardConfig', 'DimensionError', 'GameBoard', 'Grid', 'Token', 'WinDetector',
           'check_board', 'load', 'load_file', 'run_scan']
__version__ = '1.0.0'
