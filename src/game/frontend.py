"""
pygame binding for the Minesweeper game.

Provides the renderer, pointer input and frame ticker the game
controller needs, backed by a pygame window.
"""
from typing import Callable, Dict, Optional, Tuple

import pygame

from .game import GameConfig, Minesweeper
from .interaction import PointerState
from .presentation import TextAlign


# ============================================================================
# Renderer
# ============================================================================

class PygameRenderer:
    """Draws onto a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._fonts: Dict[Tuple[str, int], pygame.font.Font] = {}

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        pygame.draw.rect(self.surface, pygame.Color(color), pygame.Rect(x, y, w, h))

    def stroke_rect(
        self, x: float, y: float, w: float, h: float, color: str, line_width: int
    ) -> None:
        pygame.draw.rect(
            self.surface, pygame.Color(color), pygame.Rect(x, y, w, h), line_width
        )

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
        """Draw text with (x, y) on the baseline, anchored per ``align``."""
        face = self._font(font, int(size))
        label = face.render(text, True, pygame.Color(color))
        rect = label.get_rect()
        rect.top = int(y) - face.get_ascent()
        if align == TextAlign.CENTER:
            rect.centerx = int(x)
        elif align == TextAlign.RIGHT:
            rect.right = int(x)
        else:
            rect.left = int(x)
        self.surface.blit(label, rect)

    def present(self) -> None:
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def _font(self, name: str, size: int) -> pygame.font.Font:
        """Cached system font lookup."""
        key = (name, size)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.SysFont(name, size)
        return self._fonts[key]


# ============================================================================
# Input and Ticker
# ============================================================================

class PygameInput:
    """Polls the mouse position and left button."""

    def poll(self) -> PointerState:
        x, y = pygame.mouse.get_pos()
        left, _, _ = pygame.mouse.get_pressed()
        return PointerState(x, y, bool(left))


class PygameTicker:
    """Runs frames at a fixed rate until the window closes or Escape."""

    def __init__(self, fps: int) -> None:
        self.fps = fps
        self.clock = pygame.time.Clock()
        self.running = False

    def run(self, on_frame: Callable[[], None]) -> None:
        self.running = True
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    self.running = False
            if not self.running:
                break
            on_frame()
            self.clock.tick(self.fps)


# ============================================================================
# Entry Point
# ============================================================================

def run(config: Optional[GameConfig] = None) -> None:
    """Open a window and play until it is closed."""
    config = config or GameConfig()
    pygame.init()
    try:
        pygame.display.set_caption("Minesweeper")
        screen = pygame.display.set_mode((config.canvas_width, config.canvas_height))
        game = Minesweeper(
            PygameRenderer(screen),
            PygameInput(),
            PygameTicker(config.fps),
            config,
        )
        game.start()
    finally:
        pygame.quit()

