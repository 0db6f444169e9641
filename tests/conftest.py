"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import Board, BoardConfig, Tile, TileKind


# ============================================================================
# Test Doubles
# ============================================================================

class ScriptedRng:
    """Random source that replays fixed draws."""

    def __init__(self, draws: Iterable[float]) -> None:
        self.draws: List[float] = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self.draws[self.calls]
        self.calls += 1
        return value


def rng_for_layout(rows: List[str]) -> ScriptedRng:
    """Draws that place a mine (0.0) wherever the layout has ``*``."""
    return ScriptedRng(0.0 if char == "*" else 0.99 for row in rows for char in row)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board.from_layout(["....."] * 5)


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the top-left corner."""
    return Board.from_layout([
        "*..",
        "...",
        "...",
    ])


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board whose only mine is in the center."""
    return Board.from_layout([
        "...",
        ".*.",
        "...",
    ])


@pytest.fixture
def walled_board() -> Board:
    """Create a 5x5 board with a column of mines splitting it."""
    return Board.from_layout([
        "..*..",
        "..*..",
        "..*..",
        "..*..",
        "..*..",
    ])


@pytest.fixture
def mixed_layout() -> List[str]:
    """Irregular 6x4 layout for count checks."""
    return [
        "*..*..",
        ".*....",
        "....**",
        "*.....",
    ]


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden safe tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile containing a mine."""
    return Tile(kind=TileKind.MINE)


@pytest.fixture
def numbered_tile() -> Tile:
    """Create a revealed tile with adjacent mines."""
    tile = Tile(adjacent_mines=3)
    tile.reveal()
    return tile


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def default_config() -> BoardConfig:
    """Default 10x10 board configuration."""
    return BoardConfig()


# ============================================================================
# Random Source Fixtures
# ============================================================================

@pytest.fixture
def scripted_rng():
    """Factory for random sources that replay fixed draws."""
    return ScriptedRng


@pytest.fixture
def layout_rng():
    """Factory for random sources that reproduce a text layout."""
    return rng_for_layout
