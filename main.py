"""
Main orchestration script for XO.

This script ties together:
- Board (cells, placement, win detection)
- AI player (opening book + minimax search)
- Console UI (board rendering, prompts, results)

Run this script to play tic-tac-toe against the computer!
"""

import argparse
import sys
from typing import Optional

from xo.ai_player import AIPlayer
from xo.board import Board
from xo.cell import Outcome, Owner
from xo.config import GameConfig
from xo.errors import BoardPlacementError
from xo.win_checker import check_draw

from ui import ConsoleUI


class TicTacToeGame:
    """
    Main controller for one game.

    Game flow:
    1. Whoever goes first places a mark
    2. The board is drawn and evaluated
    3. The other player moves
    4. Repeat until someone completes a line or the board is full
    """

    def __init__(
        self,
        ui: ConsoleUI,
        human_first: bool,
        ai: Optional[AIPlayer] = None
    ):
        """
        Initialize the game.

        Args:
            ui: Console front end.
            human_first: True if the human makes the first move.
            ai: Computer opponent (default settings if omitted).
        """
        self.ui = ui
        self.human_first = human_first
        self.ai = ai or AIPlayer()
        self.board = Board()

    def play(self) -> Outcome:
        """
        Play the game to the end.

        Returns:
            The final outcome (UNDECIDED for a tie).
        """
        # The human moves when depth has this parity
        order = 1 if self.human_first else 0

        self.ui.show_board(self.board)

        # Plies left, 9 down to 1
        for depth in range(GameConfig.NUM_CELLS, 0, -1):
            if depth % 2 == order:
                self._human_move()
            else:
                self._computer_move()

            self.ui.show_board(self.board)

            outcome = self.board.evaluate()
            if outcome != Outcome.UNDECIDED:
                self.ui.show_outcome(outcome)
                return outcome

        self.ui.show_outcome(Outcome.UNDECIDED, is_draw=check_draw(self.board))
        return Outcome.UNDECIDED

    def _human_move(self):
        """Ask for a move until the board accepts it."""
        while True:
            index = self.ui.ask_move()
            try:
                self.board.place(index, Owner.HUMAN)
                return
            except BoardPlacementError as e:
                self.ui.show_message(str(e))

    def _computer_move(self):
        """Pick and play the computer's move."""
        move = self.ai.get_best_move(self.board)
        self.ui.show_computer_move(move.position)
        self.board.place(move.position, Owner.COMPUTER)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="XO: Tic-tac-toe against the computer")
    first = parser.add_mutually_exclusive_group()
    first.add_argument(
        "--human-first",
        action="store_true",
        help="Make the first move yourself (skips the question)"
    )
    first.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer make the first move (skips the question)"
    )
    parser.add_argument(
        "--no-pruning",
        action="store_true",
        help="Search with plain minimax instead of alpha-beta"
    )
    parser.add_argument(
        "--no-opening-book",
        action="store_true",
        help="Search every move, including the opening"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print search statistics for every computer move"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    ui = ConsoleUI()

    ai = AIPlayer(
        use_pruning=GameConfig.USE_PRUNING and not args.no_pruning,
        use_opening_book=GameConfig.USE_OPENING_BOOK and not args.no_opening_book,
        verbose=GameConfig.VERBOSE or args.verbose
    )

    ui.show_banner()

    try:
        if args.human_first:
            human_first = True
        elif args.computer_first:
            human_first = False
        else:
            human_first = ui.ask_human_first()

        game = TicTacToeGame(ui, human_first=human_first, ai=ai)
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
