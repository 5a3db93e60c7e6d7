"""
Errors raised when a move cannot be placed on the board.
"""

from typing import Optional

from .config import GameConfig


class BoardPlacementError(Exception):
    """A move was rejected. The message is safe to show the player."""

    default_message = "Invalid move!"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidPosition(BoardPlacementError):
    """Index is outside 1..9."""

    default_message = GameConfig.INVALID_POSITION_MESSAGE


class CellOccupied(BoardPlacementError):
    """Target cell already holds a mark."""

    default_message = GameConfig.CELL_OCCUPIED_MESSAGE
