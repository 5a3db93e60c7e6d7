"""
AI player for XO.
Uses minimax search to choose the computer's move.
"""

from typing import Optional

from .board import Board
from .cell import Owner
from .config import GameConfig
from .search import MinimaxSearch, OptimalMove

# Center cell, decisive for the first few replies
CENTER = 5


class AIPlayer:
    """
    An AI that plays XO using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    The opening book answers the first couple of plies from known good
    replies instead of searching. It only saves time; play is optimal
    with it switched off as well.
    """

    def __init__(
        self,
        use_pruning: bool = GameConfig.USE_PRUNING,
        use_opening_book: bool = GameConfig.USE_OPENING_BOOK,
        verbose: bool = GameConfig.VERBOSE
    ):
        """
        Initialize the AI player.

        Args:
            use_pruning: Search with alpha-beta pruning.
            use_opening_book: Answer early plies from the opening book.
            verbose: Print search statistics after every move.
        """
        self.searcher = MinimaxSearch(prune=use_pruning)
        self.use_opening_book = use_opening_book
        self.verbose = verbose

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, board: Board) -> OptimalMove:
        """
        Get the best move for the computer.

        Args:
            board: Current board. Must have at least one empty cell.

        Returns:
            OptimalMove with the index to play.
        """
        self.moves_evaluated = 0
        depth = len(board.empty_cells())

        move = self._opening_reply(board, depth) if self.use_opening_book else None
        if move is None:
            move = self.searcher.search(board, depth, Owner.COMPUTER)
            self.moves_evaluated = self.searcher.nodes_evaluated

        if self.verbose:
            print(
                f"AI evaluated {self.moves_evaluated} positions. "
                f"Best move: {move.position} (score: {move.score})"
            )

        return move

    def _opening_reply(self, board: Board, depth: int) -> Optional[OptimalMove]:
        """
        Look up a known reply for the first plies.

        Keyed by plies left and whether the center is still free.

        Returns:
            The book move, or None when the position needs a search.
        """
        center_free = CENTER in board.available

        if depth == 9:
            # Computer opens in the corner
            position = 1
        elif depth == 8:
            # Reply to the human's opening: center, else a corner
            position = CENTER if center_free else 1
        elif depth == 7 and not center_free:
            # Human took the center after our corner: take the opposite corner
            position = 9
        else:
            return None

        if position not in board.available:
            return None
        return OptimalMove(position, GameConfig.DRAW_SCORE)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(verbose=True)

    # Test 1: AI should block a winning move
    board = Board.from_marks(computer=[5], human=[1, 2])
    move = ai.get_best_move(board)
    assert move.position == 3, f"Expected 3, got {move.position}"
    print("AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = Board.from_marks(computer=[1, 2], human=[4, 5])
    move = ai.get_best_move(board)
    assert move.position == 3, f"Expected 3, got {move.position}"
    print("AI correctly takes the win!")

    print("\nAIPlayer test done!")
