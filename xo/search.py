"""
Game-tree search for XO.

Minimax over copies of the board, with optional alpha-beta pruning.
Scores are flat: +1 computer win, -1 human win, 0 otherwise.
"""

from dataclasses import dataclass

from .board import Board
from .cell import Outcome, Owner
from .config import GameConfig


@dataclass
class OptimalMove:
    """Best move found and its score. Position is -1 for leaves."""
    position: int
    score: int


def leaf_score(outcome: Outcome) -> int:
    """Score a board outcome from the computer's point of view."""
    if outcome == Outcome.COMPUTER_WINS:
        return GameConfig.WIN_SCORE
    if outcome == Outcome.HUMAN_WINS:
        return GameConfig.LOSS_SCORE
    return GameConfig.DRAW_SCORE


class MinimaxSearch:
    """
    Exhaustive minimax search.

    The computer maximizes, the human minimizes. Candidate moves are
    tried lowest index first and only a strictly better score replaces
    the running best, so ties go to the lowest index.

    With `prune` on, alpha-beta cutoffs skip siblings that cannot change
    the parent's choice. The move and score returned for the root are
    the same as without pruning; only fewer nodes are visited.
    """

    def __init__(self, prune: bool = GameConfig.USE_PRUNING):
        """
        Initialize the search.

        Args:
            prune: Enable alpha-beta pruning.
        """
        self.prune = prune

        # Nodes visited by the last top-level search
        self.nodes_evaluated = 0

    def search(
        self,
        board: Board,
        depth: int,
        mover: Owner,
        alpha: int = GameConfig.MIN_SENTINEL,
        beta: int = GameConfig.MAX_SENTINEL
    ) -> OptimalMove:
        """
        Find the best move for `mover`.

        Args:
            board: Position to search from. Never modified.
            depth: Plies left to explore, normally the number of empty cells.
            mover: Player to move.
            alpha: Best score the computer can already guarantee.
            beta: Best score the human can already guarantee.

        Returns:
            OptimalMove with the chosen index and its score.
        """
        self.nodes_evaluated = 0
        return self._search(board, depth, mover, alpha, beta)

    def _search(
        self,
        board: Board,
        depth: int,
        mover: Owner,
        alpha: int,
        beta: int
    ) -> OptimalMove:
        self.nodes_evaluated += 1

        outcome = board.evaluate()
        if depth == 0 or outcome != Outcome.UNDECIDED:
            return OptimalMove(GameConfig.NO_MOVE, leaf_score(outcome))

        candidates = board.empty_cells()
        if not candidates:
            return OptimalMove(GameConfig.NO_MOVE, leaf_score(outcome))

        maximizing = mover == Owner.COMPUTER
        if maximizing:
            best = OptimalMove(GameConfig.NO_MOVE, GameConfig.MIN_SENTINEL)
        else:
            best = OptimalMove(GameConfig.NO_MOVE, GameConfig.MAX_SENTINEL)

        for index in candidates:
            child = board.copy()
            child.place(index, mover)

            result = self._search(child, depth - 1, mover.opposite(), alpha, beta)
            result.position = index

            if maximizing:
                if result.score > best.score:
                    best = result
                alpha = max(alpha, best.score)
            else:
                if result.score < best.score:
                    best = result
                beta = min(beta, best.score)

            if self.prune and beta <= alpha:
                break  # Prune

        return best


def minimax(
    board: Board,
    depth: int,
    mover: Owner,
    prune: bool = GameConfig.USE_PRUNING
) -> OptimalMove:
    """Run a one-off search. See MinimaxSearch.search."""
    return MinimaxSearch(prune=prune).search(board, depth, mover)


# Quick test
if __name__ == "__main__":
    print("Testing MinimaxSearch...")

    # Computer holds 1 and 2, should complete the row at 3
    board = Board.from_marks(computer=[1, 2], human=[4, 5])
    searcher = MinimaxSearch()
    move = searcher.search(board, len(board.empty_cells()), Owner.COMPUTER)
    print(f"Best move: {move} ({searcher.nodes_evaluated} nodes)")
    assert move == OptimalMove(3, 1)

    # Human threatens 1-2-3, computer must block
    board = Board.from_marks(computer=[5], human=[1, 2])
    move = searcher.search(board, len(board.empty_cells()), Owner.COMPUTER)
    print(f"Best move: {move} ({searcher.nodes_evaluated} nodes)")
    assert move.position == 3

    print("\nMinimaxSearch test done!")
