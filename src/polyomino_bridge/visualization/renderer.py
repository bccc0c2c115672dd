from __future__ import annotations

from typing import Iterable, Optional, Tuple

import pygame

from polyomino_bridge.game import BridgeGame, Scene, Session


Color = Tuple[int, int, int]

BACKGROUND: Color = (147, 112, 219)
BRIDGE: Color = (255, 165, 0)
PIECE: Color = (255, 255, 0)
TEXT: Color = (255, 255, 255)
BUTTON: Color = (255, 255, 255)
BUTTON_HOVER: Color = (230, 230, 240)
BUTTON_TEXT: Color = (64, 64, 64)


class Renderer:
    """Draws the title screen and the game lane for a :class:`Session`."""

    def __init__(self, width: int = 800, height: int = 600, lane_height: int = 10) -> None:
        self.width = width
        self.height = height
        self.lane_px = height - 100
        self.cell_size = self.lane_px // lane_height
        button_w, button_h = 300, 60
        cx, cy = width // 2, height // 2
        self.start_button = pygame.Rect(0, 0, button_w, button_h)
        self.start_button.center = (cx, cy)
        self.exit_button = pygame.Rect(0, 0, button_w, button_h)
        self.exit_button.center = (cx, cy + 100)
        self._fonts: Optional[dict] = None

    def _font(self, name: str) -> pygame.font.Font:
        if self._fonts is None:
            self._fonts = {
                "title": pygame.font.SysFont(None, 80),
                "menu": pygame.font.SysFont(None, 36),
                "score": pygame.font.SysFont(None, 40),
            }
        return self._fonts[name]

    def _text(self, screen: pygame.Surface, font: str, text: str, center: Tuple[int, int], color: Color = TEXT) -> None:
        img = self._font(font).render(text, True, color)
        screen.blit(img, img.get_rect(center=center))

    def draw_title(self, screen: pygame.Surface, session: Session, mouse: Tuple[int, int]) -> None:
        screen.fill(BACKGROUND)
        self._text(screen, "title", "Polyomino Bridge", (self.width // 2 + 4, 126), (60, 45, 90))
        self._text(screen, "title", "Polyomino Bridge", (self.width // 2, 120))
        for rect, label in ((self.start_button, "Start"), (self.exit_button, "Exit")):
            color = BUTTON_HOVER if rect.collidepoint(mouse) else BUTTON
            pygame.draw.rect(screen, color, rect)
            pygame.draw.rect(screen, BUTTON_TEXT, rect, 2)
            self._text(screen, "menu", label, rect.center, BUTTON_TEXT)
        if session.last_score is not None:
            self._text(screen, "score", f"Score: {session.last_score}", (self.width - 180, self.height - 90))
        self._text(screen, "score", f"High score: {session.high_score}", (self.width - 180, self.height - 50))

    def _cells(self, screen: pygame.Surface, cells: Iterable[Tuple[int, int]], shift: int, color: Color) -> None:
        size = self.cell_size
        for x, y in cells:
            rect = pygame.Rect((x - shift) * size, y * size, size, size)
            pygame.draw.rect(screen, color, rect)

    def draw_game(self, screen: pygame.Surface, game: BridgeGame) -> None:
        screen.fill(BACKGROUND)
        shift = game.camera_shift()
        self._cells(screen, game.bridge, shift, BRIDGE)
        px, py = game.position
        self._cells(screen, game.piece.cells_at(px, py), shift, PIECE)
        pygame.draw.rect(screen, (0, 0, 0), pygame.Rect(0, self.lane_px, self.width, self.height - self.lane_px))
        self._text(screen, "score", f"Score: {game.score}", (self.width - 180, self.lane_px + 50))

    def draw(self, screen: pygame.Surface, session: Session, mouse: Tuple[int, int] = (-1, -1)) -> None:
        if session.game is not None and session.scene == Scene.GAME:
            self.draw_game(screen, session.game)
        else:
            self.draw_title(screen, session, mouse)
        pygame.display.flip()
