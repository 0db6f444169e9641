"""
Board module for Minesweeper game.

Implements the game board with random mine placement, adjacent mine
counting, and the cascading reveal.
"""
from dataclasses import dataclass, field
from typing import List, Tuple, Set, Optional, Sequence, Union, Protocol

import numpy as np

from .tile import Tile, TileKind, OutOfBoundsTile, OUT_OF_BOUNDS


# ============================================================================
# Constants
# ============================================================================

# Orthogonal cascade order: up, left, right, down
CASCADE_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))


class RandomSource(Protocol):
    """Anything with a ``random()`` returning floats in [0, 1)."""

    def random(self) -> float:
        ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the numpy generator used for mine placement."""
    return np.random.default_rng(seed)


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_probability: Chance that any single tile is a mine.
    """

    width: int = 10
    height: int = 10
    mine_probability: float = 0.1

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if not 0.0 <= self.mine_probability <= 1.0:
            raise ValueError("Mine probability must be between 0 and 1")


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of tiles. Tile kinds and counts are fixed once the
    board is built; only the revealed flags change afterwards.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    _tiles: List[Tile] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Create an all-safe grid if no tiles were supplied."""
        if not self._tiles:
            self._tiles = [Tile() for _ in range(self.width * self.height)]
        if len(self._tiles) != self.width * self.height:
            raise ValueError("Tile count does not match board dimensions")

    # ========================================================================
    # Construction (Low-level)
    # ========================================================================

    @classmethod
    def generate(
        cls,
        config: Optional[BoardConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> "Board":
        """
        Build a board with randomly placed mines.

        Args:
            config: Board configuration (default: 10x10, 1 in 10 mines).
            rng: Random source; one ``random()`` draw per tile.

        Returns:
            Fully initialized board with every tile hidden.
        """
        config = config or BoardConfig()
        rng = rng if rng is not None else make_rng()

        tiles = []
        for _ in range(config.width * config.height):
            if rng.random() < config.mine_probability:
                tiles.append(Tile(kind=TileKind.MINE))
            else:
                tiles.append(Tile(kind=TileKind.SAFE))

        board = cls(config, tiles)
        board._calculate_adjacent_mines()
        return board

    @classmethod
    def from_layout(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows, ``*`` marking a mine.

        Args:
            rows: One string per row, all the same length.
        """
        if not rows or not rows[0]:
            raise ValueError("Layout must have at least one row and column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Layout rows must all have the same length")

        tiles = [
            Tile(kind=TileKind.MINE if char == "*" else TileKind.SAFE)
            for row in rows
            for char in row
        ]
        board = cls(BoardConfig(width, len(rows), 0.0), tiles)
        board._calculate_adjacent_mines()
        return board

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts once every mine is placed."""
        for y in range(self.height):
            for x in range(self.width):
                tile = self._tiles[self.index(x, y)]
                if tile.is_safe:
                    tile.adjacent_mines = self.count_adjacent_mines(x, y)

    def count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines among the up to 8 tiles around (x, y)."""
        return sum(
            1 for nx, ny in self.neighbors(x, y) if self.get_tile(nx, ny).is_mine
        )

    # ========================================================================
    # Geometry Utilities (Low-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def index(self, x: int, y: int) -> int:
        """
        Return the flat list index for (x, y).

        Rows are ``width`` tiles long. This equals ``y * height + x`` on
        square boards only; the height-based form aliases tiles on
        non-square boards.
        """
        return y * self.width + x

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get in-bounds positions of the 8 surrounding tiles.

        Args:
            x: Column of center tile.
            y: Row of center tile.

        Returns:
            List of (x, y) tuples.
        """
        result = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.is_valid_position(new_x, new_y):
                    result.append((new_x, new_y))
        return result

    def get_tile(self, x: int, y: int) -> Union[Tile, OutOfBoundsTile]:
        """Get tile at position, or the out-of-bounds sentinel."""
        if not self.is_valid_position(x, y):
            return OUT_OF_BOUNDS
        return self._tiles[self.index(x, y)]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> int:
        """
        Reveal the tile at (x, y).

        Mines and numbered tiles are revealed alone. An empty tile
        spreads to its orthogonal neighbors until numbered tiles stop
        it. Out-of-range or already revealed positions are ignored.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            Number of tiles newly revealed.
        """
        tile = self.get_tile(x, y)
        if isinstance(tile, OutOfBoundsTile) or tile.revealed:
            return 0

        tile.reveal()
        if not tile.is_empty:
            return 1
        return 1 + self._cascade(x, y)

    def _cascade(self, x: int, y: int) -> int:
        """Flood outward from an empty tile with an explicit stack."""
        revealed = 0
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            # Reversed so the stack pops up, left, right, down in order
            for dx, dy in reversed(CASCADE_OFFSETS):
                nx, ny = cx + dx, cy + dy
                neighbor = self.get_tile(nx, ny)
                if not neighbor.is_safe or neighbor.revealed:
                    continue
                neighbor.reveal()
                revealed += 1
                if neighbor.is_empty:
                    stack.append((nx, ny))
        return revealed

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def revealed_positions(self) -> Set[Tuple[int, int]]:
        """Get the set of revealed (x, y) positions."""
        return {
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self._tiles[self.index(x, y)].revealed
        }

    @property
    def mine_count(self) -> int:
        """Number of mines on the board."""
        return sum(1 for tile in self._tiles if tile.is_mine)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array of shape (height, width) where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for y in range(self.height):
            for x in range(self.width):
                obs[y, x] = self._tiles[self.index(x, y)].to_observation()
        return obs

    def render_ansi(self) -> str:
        """Render board as ASCII string."""
        lines = []
        obs = self.get_observation()

        for y in range(self.height):
            row_str = ""
            for x in range(self.width):
                val = obs[y, x]
                if val == -1:
                    row_str += "."
                elif val == 9:
                    row_str += "*"
                elif val == 0:
                    row_str += " "
                else:
                    row_str += str(val)
                row_str += " "
            lines.append(row_str.rstrip())

        return "\n".join(lines)
