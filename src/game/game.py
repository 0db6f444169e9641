"""
Game controller for Minesweeper.

Runs one input -> reveal -> draw cycle per frame against abstract
renderer, input and ticker capabilities, so the same game drives a
pygame window or a test double.
"""
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .board import Board, BoardConfig, RandomSource, make_rng
from .interaction import PointerState, clicked_tile
from .presentation import (
    FillRect,
    FillText,
    StrokeRect,
    TextAlign,
    frame_commands,
)


# ============================================================================
# Capabilities
# ============================================================================

class Renderer(Protocol):
    """Drawing surface."""

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        ...

    def stroke_rect(
        self, x: float, y: float, w: float, h: float, color: str, line_width: int
    ) -> None:
        ...

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        font: str,
        size: float,
        align: TextAlign,
        color: str,
    ) -> None:
        ...

    def present(self) -> None:
        ...


class InputSource(Protocol):
    """Level-triggered pointer input, polled once per frame."""

    def poll(self) -> PointerState:
        ...


class Ticker(Protocol):
    """Calls ``on_frame`` once per display refresh until stopped."""

    def run(self, on_frame: Callable[[], None]) -> None:
        ...


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class GameConfig:
    """
    Configuration for a game window.

    Attributes:
        board_width: Number of columns.
        board_height: Number of rows.
        tile_size: Tile edge length in pixels.
        canvas_width: Drawing surface width in pixels.
        canvas_height: Drawing surface height in pixels.
        fps: Frames per second.
        mine_probability: Chance that any single tile is a mine.
        seed: Seed for mine placement, or None for fresh entropy.
    """

    board_width: int = 10
    board_height: int = 10
    tile_size: int = 32
    canvas_width: int = 640
    canvas_height: int = 480
    fps: int = 60
    mine_probability: float = 0.1
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.tile_size < 1:
            raise ValueError("Tile size must be positive")
        if self.canvas_width < 1 or self.canvas_height < 1:
            raise ValueError("Canvas dimensions must be positive")
        if self.fps < 1:
            raise ValueError("FPS must be positive")
        # Fail here rather than at first frame
        self.board_config()

    def board_config(self) -> BoardConfig:
        """Board configuration derived from this game configuration."""
        return BoardConfig(
            width=self.board_width,
            height=self.board_height,
            mine_probability=self.mine_probability,
        )


# ============================================================================
# Game
# ============================================================================

class Minesweeper:
    """
    Frame-driven Minesweeper game.

    Each frame polls the pointer, reveals the tile under it while the
    primary button is held, and redraws the whole board.
    """

    def __init__(
        self,
        renderer: Renderer,
        input_source: InputSource,
        ticker: Ticker,
        config: Optional[GameConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        """
        Initialize the game.

        Args:
            renderer: Surface that receives draw calls.
            input_source: Pointer polled once per frame.
            ticker: Frame scheduler.
            config: Game configuration (default: 10x10 board, 32px tiles).
            rng: Random source for mine placement (default: seeded from
                ``config.seed``).
        """
        self.renderer = renderer
        self.input_source = input_source
        self.ticker = ticker
        self.config = config or GameConfig()
        rng = rng if rng is not None else make_rng(self.config.seed)
        self.board = Board.generate(self.config.board_config(), rng)
        self.pointer = PointerState()

    def start(self) -> None:
        """Hand control to the ticker."""
        self.ticker.run(self.on_frame)

    def on_frame(self) -> None:
        """Run one frame."""
        self.update()
        self.draw()

    def update(self) -> int:
        """
        Sample input and apply it to the board.

        Returns:
            Number of tiles revealed this frame.
        """
        self.pointer = self.input_source.poll()
        target = clicked_tile(self.board, self.config.tile_size, self.pointer)
        if target is None:
            return 0
        return self.board.reveal(*target)

    def draw(self) -> None:
        """Send this frame's draw commands to the renderer."""
        commands = frame_commands(
            self.board,
            self.config.tile_size,
            self.pointer.position,
            (self.config.canvas_width, self.config.canvas_height),
        )
        for command in commands:
            if isinstance(command, FillRect):
                self.renderer.fill_rect(
                    command.x, command.y, command.width, command.height, command.color
                )
            elif isinstance(command, StrokeRect):
                self.renderer.stroke_rect(
                    command.x,
                    command.y,
                    command.width,
                    command.height,
                    command.color,
                    command.line_width,
                )
            elif isinstance(command, FillText):
                self.renderer.fill_text(
                    command.text,
                    command.x,
                    command.y,
                    command.font,
                    command.size,
                    command.align,
                    command.color,
                )
        self.renderer.present()
