"""
Cell values for the XO board.

A cell is either Empty (showing its 1-based label) or a Mark
owned by one of the two players.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .config import GameConfig


class Owner(Enum):
    """The two players in the game."""
    HUMAN = GameConfig.HUMAN_GLYPH
    COMPUTER = GameConfig.COMPUTER_GLYPH

    def opposite(self) -> "Owner":
        """Get the opposite player."""
        return Owner.COMPUTER if self == Owner.HUMAN else Owner.HUMAN


@dataclass(frozen=True)
class Empty:
    """An unclaimed cell. The label is for display only."""
    label: int = field(compare=False)

    def __str__(self) -> str:
        return str(self.label)


@dataclass(frozen=True)
class Mark:
    """A cell claimed by a player."""
    owner: Owner

    def __str__(self) -> str:
        return self.owner.value


Cell = Union[Empty, Mark]


class Outcome(Enum):
    """Result of evaluating a board."""
    COMPUTER_WINS = "computer"
    HUMAN_WINS = "human"
    UNDECIDED = "undecided"  # Game still going, or a draw

    @classmethod
    def for_owner(cls, owner: Optional[Owner]) -> "Outcome":
        """Map a winning owner (or None) to an outcome."""
        if owner == Owner.COMPUTER:
            return cls.COMPUTER_WINS
        if owner == Owner.HUMAN:
            return cls.HUMAN_WINS
        return cls.UNDECIDED
