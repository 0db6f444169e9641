"""
Presentation rules for Minesweeper tiles.

Turns tile state into colors, labels and draw commands. Nothing here
mutates the board or talks to a drawing surface.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from .board import Board
from .interaction import hit_test, tile_rect
from .tile import Tile, OutOfBoundsTile


# ============================================================================
# Constants
# ============================================================================

HIDDEN_COLOR = "#a0a0a0"
MINE_COLOR = "red"
EMPTY_COLOR = "#202020"
NUMBER_COLOR = "#a0a0a0"
BACKGROUND_COLOR = "black"
BORDER_COLOR = "white"
HOVER_BORDER_COLOR = "green"
LABEL_COLOR = "white"
LABEL_FONT = "Arial"
BORDER_WIDTH = 1


class TextAlign(Enum):
    """Horizontal anchoring of text around its x coordinate."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# ============================================================================
# Draw Commands
# ============================================================================

@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class StrokeRect:
    x: float
    y: float
    width: float
    height: float
    color: str
    line_width: int = BORDER_WIDTH


@dataclass(frozen=True)
class FillText:
    text: str
    x: float
    y: float
    font: str
    size: float
    align: TextAlign
    color: str


DrawCommand = Union[FillRect, StrokeRect, FillText]
AnyTile = Union[Tile, OutOfBoundsTile]


# ============================================================================
# Tile Rules
# ============================================================================

def tile_color(tile: AnyTile) -> str:
    """Background color for a tile."""
    if not tile.revealed:
        return HIDDEN_COLOR
    if tile.is_mine:
        return MINE_COLOR
    if tile.adjacent_mines == 0:
        return EMPTY_COLOR
    return NUMBER_COLOR


def tile_label(tile: AnyTile) -> Optional[str]:
    """Digit shown on a revealed numbered tile, else None."""
    if tile.revealed and tile.is_safe and tile.adjacent_mines > 0:
        return str(tile.adjacent_mines)
    return None


def border_color(hovered: bool) -> str:
    return HOVER_BORDER_COLOR if hovered else BORDER_COLOR


# ============================================================================
# Frame Assembly
# ============================================================================

def frame_commands(
    board: Board,
    tile_size: float,
    cursor: Tuple[float, float],
    canvas_size: Tuple[float, float],
) -> List[DrawCommand]:
    """
    Build the draw commands for one frame.

    The background is cleared first, then each tile is drawn row by row
    as a fill, a border (highlighted under the cursor) and its label.

    Args:
        board: Board to draw.
        tile_size: Edge length of one tile.
        cursor: Pointer position, used for the hover border.
        canvas_size: (width, height) of the drawing surface.

    Returns:
        Commands in paint order.
    """
    canvas_width, canvas_height = canvas_size
    commands: List[DrawCommand] = [
        FillRect(0, 0, canvas_width, canvas_height, BACKGROUND_COLOR)
    ]
    hovered = hit_test(board, tile_size, cursor)

    for y in range(board.height):
        for x in range(board.width):
            tile = board.get_tile(x, y)
            rect = tile_rect(x, y, tile_size)
            commands.append(FillRect(*rect, tile_color(tile)))
            commands.append(StrokeRect(*rect, border_color(hovered == (x, y))))

            label = tile_label(tile)
            if label is not None:
                commands.append(
                    FillText(
                        label,
                        tile_size / 2 + x * tile_size,
                        tile_size / 1.1 + y * tile_size,
                        LABEL_FONT,
                        tile_size,
                        TextAlign.CENTER,
                        LABEL_COLOR,
                    )
                )
    return commands
