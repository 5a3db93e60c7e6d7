"""
XO: Tic-tac-toe
===============
Board model and game-tree search for a terminal game of
tic-tac-toe against the computer.
"""

from .cell import Owner, Empty, Mark, Outcome
from .board import Board
from .errors import BoardPlacementError, InvalidPosition, CellOccupied
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WINNING_LINES, check_winner, check_draw
from .search import MinimaxSearch, OptimalMove, minimax
from .ai_player import AIPlayer
from .config import GameConfig

__version__ = "1.0.0"
