"""
Pointer-to-tile mapping.

Uses the same tile geometry the renderer draws with, so a tile is hit
exactly where it appears on screen.
"""
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from .board import Board


class Rect(NamedTuple):
    """Axis-aligned rectangle in draw-space units."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        """Half-open containment: left/top edges inside, right/bottom out."""
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )


@dataclass(frozen=True)
class PointerState:
    """One polled sample of the pointer."""

    x: float = 0.0
    y: float = 0.0
    primary_down: bool = False

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


def tile_rect(x: int, y: int, tile_size: float) -> Rect:
    """Draw-space rectangle of tile (x, y)."""
    return Rect(x * tile_size, y * tile_size, tile_size, tile_size)


def hit_test(
    board: Board, tile_size: float, cursor: Tuple[float, float]
) -> Optional[Tuple[int, int]]:
    """
    Find the tile under the cursor.

    Args:
        board: Board supplying the grid dimensions.
        tile_size: Edge length of one tile in draw-space units.
        cursor: (x, y) position in draw-space units.

    Returns:
        (x, y) of the tile containing the cursor, or None.
    """
    cx, cy = cursor
    for y in range(board.height):
        for x in range(board.width):
            if tile_rect(x, y, tile_size).contains(cx, cy):
                return (x, y)
    return None


def clicked_tile(
    board: Board, tile_size: float, pointer: PointerState
) -> Optional[Tuple[int, int]]:
    """Tile under the pointer while the primary button is held."""
    if not pointer.primary_down:
        return None
    return hit_test(board, tile_size, pointer.position)
