"""
Win checker for XO.
Checks if a player has completed a line or if the game is a draw.
"""

from typing import Dict, Optional, Tuple

from .cell import Cell, Mark, Owner


# All possible winning lines (as 1-based cell indices)
WINNING_LINES = (
    # Rows
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    # Columns
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    # Diagonals
    (1, 5, 9),
    (3, 5, 7),
)


def _check_line(cells: Dict[int, Cell], line: Tuple[int, int, int]) -> Optional[Owner]:
    """
    Check if a single line has a winner.

    Args:
        cells: Mapping of index -> cell.
        line: Three cell indices.

    Returns:
        The winning Owner if all 3 cells carry the same mark, None otherwise.
    """
    first, second, third = (cells[i] for i in line)
    if not isinstance(first, Mark):
        return None  # Empty cell, no winner on this line
    if first == second == third:
        return first.owner
    return None


def check_winner(cells: Dict[int, Cell]) -> Optional[Owner]:
    """
    Check if there's a winner.

    Every line is examined; a line only counts when all three
    cells are marks of the same owner.

    Returns:
        The winning Owner, or None if no winner yet.
    """
    for line in WINNING_LINES:
        winner = _check_line(cells, line)
        if winner is not None:
            return winner
    return None


def get_winning_line(cells: Dict[int, Cell]) -> Optional[Tuple[int, int, int]]:
    """Get the winning line if there is one."""
    for line in WINNING_LINES:
        if _check_line(cells, line) is not None:
            return line
    return None


def check_draw(board) -> bool:
    """
    Check if the game is a draw.

    A draw occurs when all cells are filled and nobody has a line.
    """
    if check_winner(board.cells) is not None:
        return False
    return board.is_full()
