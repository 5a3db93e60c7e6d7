"""
XO console UI
Plain-text interface for the terminal game.

Shows:
- The 3x3 board (o for the human, x for the computer, labels for free cells)
- Prompts for who goes first and for the human's moves
- The computer's move and the final result
"""

from typing import Callable, List, Optional

from xo.board import Board
from xo.cell import Outcome
from xo.config import GameConfig
from xo.move_validator import MoveValidator


def render_board(board: Board) -> str:
    """
    Render the board as three text rows.

    Args:
        board: Board to draw.

    Returns:
        The grid, rows separated by a divider line.
    """
    size = GameConfig.BOARD_SIZE
    rows: List[str] = []
    for row in range(size):
        first = row * size + 1
        rows.append(" | ".join(str(board.cell(i)) for i in range(first, first + size)))
    return f"\n{GameConfig.ROW_DIVIDER}\n".join(rows)


class ConsoleUI:
    """
    Terminal front end for the game.

    Input and output go through `input_func` and `output` so a game
    can be driven from a script.
    """

    YES_NO_CHOICES = ["Yes", "No"]

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize the UI.

        Args:
            input_func: Reads one line given a prompt (default: input).
            output: Writes one message (default: print).
        """
        self.input_func = input_func or input
        self.output = output or print
        self.validator = MoveValidator()

    def ask_human_first(self) -> bool:
        """
        Ask whether the human wants to move first.

        Returns:
            True for "Yes" (also the default on an empty answer).
        """
        self.output(GameConfig.GO_FIRST_PROMPT)
        for number, choice in enumerate(self.YES_NO_CHOICES, start=1):
            self.output(f"  {number}) {choice}")

        while True:
            answer = self.input_func("> ").strip().lower()
            if answer in ("", "1", "y", "yes"):
                return True
            if answer in ("2", "n", "no"):
                return False
            self.output("Please choose 1 (Yes) or 2 (No).")

    def ask_move(self) -> int:
        """
        Read the human's move until it is a number.

        Range and occupancy are checked by the board afterwards.
        """
        while True:
            result = self.validator.parse_move(self.input_func(f"{GameConfig.MOVE_PROMPT}: "))
            if result.is_valid:
                return result.index
            self.output(result.error_message)

    def show_banner(self):
        """Print the game title."""
        self.output(f"\n{GameConfig.BANNER}\n")

    def show_board(self, board: Board):
        """Print the board with a blank line around it."""
        self.output(f"\n{render_board(board)}\n")

    def show_message(self, message: str):
        """Print a one-line message."""
        self.output(message)

    def show_computer_move(self, index: int):
        """Announce the computer's move."""
        self.output(f"Computer's move: {index}")

    def show_outcome(self, outcome: Outcome, is_draw: bool = False):
        """
        Print the final result.

        Args:
            outcome: Result of Board.evaluate().
            is_draw: True when the board is full without a winner.
        """
        if outcome == Outcome.COMPUTER_WINS:
            self.output(f"{GameConfig.COMPUTER_WINS_MESSAGE}\n")
        elif outcome == Outcome.HUMAN_WINS:
            self.output(f"{GameConfig.HUMAN_WINS_MESSAGE}\n")
        elif is_draw:
            self.output(f"{GameConfig.TIE_MESSAGE}\n")
