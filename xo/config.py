"""
Game configuration for XO.
Glyphs, messages and search settings in one place.
"""


class GameConfig:
    """
    Configuration for the terminal game.

    Command line flags in main.py override the default toggles
    for a single run.
    """

    # ==================== BOARD ====================
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # Cells are numbered 1..9

    # Glyphs shown on the board
    HUMAN_GLYPH = "o"
    COMPUTER_GLYPH = "x"

    # Divider printed between rows
    ROW_DIVIDER = "- + - + -"

    # ==================== SEARCH ====================
    # Leaf scores
    WIN_SCORE = 1       # Computer wins
    LOSS_SCORE = -1     # Human wins
    DRAW_SCORE = 0      # Draw or undecided

    # Starting values for the running best (worse than any leaf)
    MAX_SENTINEL = 50
    MIN_SENTINEL = -50

    # Position reported when search returns a leaf
    NO_MOVE = -1

    # ==================== DEFAULTS ====================
    USE_PRUNING = True        # Alpha-beta instead of plain minimax
    USE_OPENING_BOOK = True   # Skip search on the first couple of plies
    VERBOSE = False           # Print search statistics

    # ==================== MESSAGES ====================
    BANNER = "XO: Tic-tac-toe"
    GO_FIRST_PROMPT = "Do you want to go first?"
    MOVE_PROMPT = "Your move"

    INVALID_POSITION_MESSAGE = "Invalid position! Choose between 1 and 9."
    CELL_OCCUPIED_MESSAGE = "Invalid move! Position is already taken."
    NOT_A_NUMBER_MESSAGE = "Please type a number between 1 and 9."

    COMPUTER_WINS_MESSAGE = "* Computer wins! *"
    HUMAN_WINS_MESSAGE = "* You win! *"
    TIE_MESSAGE = "* Tie *"

    @staticmethod
    def index_to_row_col(index: int):
        """
        Convert a 1-based cell index into a 0-based (row, col) pair.

        Args:
            index: Cell index (1-9).

        Returns:
            (row, col) tuple.
        """
        return (index - 1) // GameConfig.BOARD_SIZE, (index - 1) % GameConfig.BOARD_SIZE

    @staticmethod
    def row_col_to_index(row: int, col: int) -> int:
        """Convert a 0-based (row, col) pair into a 1-based cell index."""
        return row * GameConfig.BOARD_SIZE + col + 1
