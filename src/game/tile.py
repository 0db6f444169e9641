"""
Tile module for Minesweeper game.

Represents individual tiles on the game board with their content
(mine/safe with an adjacent count) and whether they have been revealed.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class TileKind(Enum):
    """What a tile holds."""

    UNSET = auto()
    SAFE = auto()
    MINE = auto()


# ============================================================================
# Tile Data Classes
# ============================================================================

@dataclass
class Tile:
    """
    Represents a single tile in the Minesweeper grid.

    Attributes:
        kind: SAFE or MINE. Fixed once the board is generated.
        adjacent_mines: Count of mines in neighboring tiles (0-8).
        revealed: Whether the tile is shown. Never reverts to False.
    """

    kind: TileKind = TileKind.SAFE
    adjacent_mines: int = 0
    revealed: bool = False

    def reveal(self) -> bool:
        """
        Reveal this tile.

        Returns:
            True if the tile was hidden, False if already revealed.
        """
        if self.revealed:
            return False
        self.revealed = True
        return True

    @property
    def is_mine(self) -> bool:
        """Check if tile is a mine."""
        return self.kind == TileKind.MINE

    @property
    def is_safe(self) -> bool:
        """Check if tile is safe."""
        return self.kind == TileKind.SAFE

    @property
    def is_empty(self) -> bool:
        """Check if tile is safe with no adjacent mines."""
        return self.is_safe and self.adjacent_mines == 0

    def to_observation(self) -> int:
        """
        Convert tile to an observation value.

        Returns:
            -1: Hidden tile
            0-8: Revealed safe tile with adjacent mine count
            9: Revealed mine
        """
        if not self.revealed:
            return -1
        if self.is_mine:
            return 9
        return self.adjacent_mines


@dataclass(frozen=True)
class OutOfBoundsTile:
    """Read-only stand-in for lookups outside the board."""

    kind: TileKind = TileKind.UNSET
    adjacent_mines: int = 0
    revealed: bool = False

    @property
    def is_mine(self) -> bool:
        return False

    @property
    def is_safe(self) -> bool:
        return False

    @property
    def is_empty(self) -> bool:
        return False


OUT_OF_BOUNDS = OutOfBoundsTile()
