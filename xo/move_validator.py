"""
Move validator for XO.
Turns what the player typed into a cell index.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Board
from .cell import Owner
from .config import GameConfig
from .errors import BoardPlacementError


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    index: Optional[int] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates XO moves.

    Rules:
    1. Input must be a whole number
    2. Number must be a cell index 1..9
    3. Cell must be empty
    """

    def parse_move(self, text: str) -> ValidationResult:
        """
        Parse raw terminal input.

        Only the number format is checked here; range and occupancy
        are enforced by Board.place.

        Args:
            text: What the player typed.

        Returns:
            ValidationResult with the parsed index or an error message.
        """
        try:
            index = int(text.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=GameConfig.NOT_A_NUMBER_MESSAGE
            )
        return ValidationResult(is_valid=True, index=index)

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Check a move against the board without changing it.

        Args:
            board: Current board.
            index: Cell index to check.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Scratch copy, the real board is left as is
        try:
            board.copy().place(index, Owner.HUMAN)
        except BoardPlacementError as e:
            return ValidationResult(is_valid=False, index=index, error_message=e.message)
        return ValidationResult(is_valid=True, index=index)
