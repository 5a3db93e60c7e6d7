"""
Board model for XO.
Tracks the nine cells and which of them are still free.
"""

from typing import Dict, Iterable, List, Set

from .cell import Cell, Empty, Mark, Outcome, Owner
from .config import GameConfig
from .errors import CellOccupied, InvalidPosition
from .win_checker import check_winner


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are addressed by index 1..9, left to right, top to bottom:

        1 | 2 | 3
        4 | 5 | 6
        7 | 8 | 9

    `available` caches the indices whose cell is still Empty so the
    search can enumerate candidate moves without scanning the grid.
    """

    def __init__(self):
        self.cells: Dict[int, Cell] = {
            i: Empty(i) for i in range(1, GameConfig.NUM_CELLS + 1)
        }
        self.available: Set[int] = set(self.cells)

    @classmethod
    def new(cls) -> "Board":
        """Create an empty board."""
        return cls()

    @classmethod
    def from_marks(
        cls,
        computer: Iterable[int] = (),
        human: Iterable[int] = ()
    ) -> "Board":
        """
        Build a board with the given cells already claimed.

        Args:
            computer: Indices holding the computer's mark.
            human: Indices holding the human's mark.

        Returns:
            The new board.

        Raises:
            InvalidPosition, CellOccupied: Same as `place`.
        """
        board = cls()
        for index in computer:
            board.place(index, Owner.COMPUTER)
        for index in human:
            board.place(index, Owner.HUMAN)
        return board

    def place(self, index: int, owner: Owner) -> None:
        """
        Place a mark for `owner` at `index`.

        Args:
            index: Cell index (1-9).
            owner: Player making the move.

        Raises:
            InvalidPosition: Index is not in 1..9.
            CellOccupied: Cell already holds a mark.
        """
        # bool is an int subclass, reject it explicitly
        if not isinstance(index, int) or isinstance(index, bool) or index not in self.cells:
            raise InvalidPosition()

        if isinstance(self.cells[index], Mark):
            raise CellOccupied()

        self.cells[index] = Mark(owner)
        self.available.discard(index)

    def place_at(self, row: int, col: int, owner: Owner) -> None:
        """Place a mark using 0-based row/column coordinates."""
        if not (0 <= row < GameConfig.BOARD_SIZE and 0 <= col < GameConfig.BOARD_SIZE):
            raise InvalidPosition()
        self.place(GameConfig.row_col_to_index(row, col), owner)

    def cell(self, index: int) -> Cell:
        """Get the cell at `index`."""
        return self.cells[index]

    def evaluate(self) -> Outcome:
        """
        Evaluate the board.

        Returns:
            COMPUTER_WINS or HUMAN_WINS if that player owns a full line,
            UNDECIDED otherwise (the game may be ongoing or drawn).
        """
        return Outcome.for_owner(check_winner(self.cells))

    def empty_cells(self) -> List[int]:
        """Get the indices of all empty cells, lowest first."""
        return sorted(self.available)

    def is_full(self) -> bool:
        """True when no empty cells remain."""
        return not self.available

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board.__new__(Board)
        new_board.cells = dict(self.cells)
        new_board.available = set(self.available)
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        marks = "".join(str(self.cells[i]) for i in sorted(self.cells))
        return f"Board({marks!r})"


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    assert board.empty_cells() == list(range(1, 10))

    board.place(1, Owner.COMPUTER)
    board.place(5, Owner.HUMAN)
    print(f"After two moves: {board!r}")

    try:
        board.place(5, Owner.COMPUTER)
    except CellOccupied as e:
        print(f"Rejected: {e}")

    board = Board.from_marks(computer=[1, 2, 3], human=[4, 5])
    print(f"Outcome: {board.evaluate()}")
    assert board.evaluate() == Outcome.COMPUTER_WINS

    print("\nBoard test done!")
