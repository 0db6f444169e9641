"""
Minesweeper game module.

Provides the board model, pointer hit testing, tile presentation rules
and the frame-driven game controller. The pygame binding lives in
``game.frontend`` and is imported on demand.
"""
from .tile import Tile, TileKind, OutOfBoundsTile, OUT_OF_BOUNDS
from .board import Board, BoardConfig, RandomSource, make_rng
from .interaction import PointerState, Rect, tile_rect, hit_test, clicked_tile
from .presentation import (
    FillRect,
    StrokeRect,
    FillText,
    TextAlign,
    tile_color,
    tile_label,
    border_color,
    frame_commands,
)
from .game import GameConfig, Minesweeper, Renderer, InputSource, Ticker

__all__ = [
    "Tile",
    "TileKind",
    "OutOfBoundsTile",
    "OUT_OF_BOUNDS",
    "Board",
    "BoardConfig",
    "RandomSource",
    "make_rng",
    "PointerState",
    "Rect",
    "tile_rect",
    "hit_test",
    "clicked_tile",
    "FillRect",
    "StrokeRect",
    "FillText",
    "TextAlign",
    "tile_color",
    "tile_label",
    "border_color",
    "frame_commands",
    "GameConfig",
    "Minesweeper",
    "Renderer",
    "InputSource",
    "Ticker",
]
