"""pygame frontend drawing the same session snapshots in a window."""

from __future__ import annotations

import logging

import pygame

from .config import FPS, GAME_OVER_PAUSE_MS
from .controls import Command, apply_command
from .engine import TickOutcome
from .session import GameSession, SessionSnapshot

logger = logging.getLogger(__name__)

BLOCK: int = 24
HUD_HEIGHT: int = 36
FONT_NAME: str = "consolas"
FONT_SIZE: int = 22

PALETTE = {
    "bg_top": pygame.Color(7, 10, 18),
    "bg_bottom": pygame.Color(2, 24, 43),
    "grid": pygame.Color(10, 40, 60),
    "item": pygame.Color(255, 84, 138),
    "item_glow": pygame.Color(255, 84, 138, 90),
    "text": pygame.Color(216, 239, 255),
    "hud": pygame.Color(10, 10, 10, 150),
    "snake": [
        pygame.Color(57, 255, 233),
        pygame.Color(127, 255, 212),
        pygame.Color(0, 230, 255),
        pygame.Color(178, 255, 255),
    ],
}

KEY_TO_COMMAND = {
    pygame.K_UP: Command.UP,
    pygame.K_w: Command.UP,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_s: Command.DOWN,
    pygame.K_LEFT: Command.LEFT,
    pygame.K_a: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_d: Command.RIGHT,
    pygame.K_q: Command.QUIT,
}


def cell_rect(pos: tuple[int, int]) -> pygame.Rect:
    return pygame.Rect(pos[0] * BLOCK, pos[1] * BLOCK + HUD_HEIGHT, BLOCK, BLOCK)


class WindowGame:
    """Encapsulates the window, event polling and rendering for one session."""

    def __init__(self, session: GameSession) -> None:
        pygame.init()
        self.session = session
        self.board_size = (session.width * BLOCK, session.height * BLOCK)
        self.window = pygame.display.set_mode(
            (self.board_size[0], self.board_size[1] + HUD_HEIGHT), pygame.DOUBLEBUF
        )
        pygame.display.set_caption("Snake")
        self.background = self._build_background()
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)

    def _build_background(self) -> pygame.Surface:
        """Create a gradient grid background once to keep draw() light."""
        width, height = self.board_size
        surface = pygame.Surface((width, height))
        top, bottom = PALETTE["bg_top"], PALETTE["bg_bottom"]
        for y in range(height):
            t = y / height
            r = int(top.r + (bottom.r - top.r) * t)
            g = int(top.g + (bottom.g - top.g) * t)
            b = int(top.b + (bottom.b - top.b) * t)
            pygame.draw.line(surface, (r, g, b), (0, y), (width, y))
        for i in range(0, width, BLOCK):
            pygame.draw.line(surface, PALETTE["grid"], (i, 0), (i, height), 1)
        for i in range(0, height, BLOCK):
            pygame.draw.line(surface, PALETTE["grid"], (0, i), (width, i), 1)
        return surface

    # --- Input ---------------------------------------------------------

    def poll_command(self) -> Command:
        """Drain pending events; the last meaningful one wins."""
        command = Command.NONE
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return Command.QUIT
            if event.type == pygame.KEYDOWN:
                mapped = KEY_TO_COMMAND.get(event.key, Command.NONE)
                if mapped is Command.QUIT:
                    return mapped
                if mapped is not Command.NONE:
                    command = mapped
        return command

    # --- Draw ----------------------------------------------------------

    def _draw_item(self, pos: tuple[int, int]) -> None:
        rect = cell_rect(pos)
        glow = pygame.Surface((BLOCK * 2, BLOCK * 2), pygame.SRCALPHA)
        pygame.draw.circle(glow, PALETTE["item_glow"], (BLOCK, BLOCK), BLOCK // 2 + 5)
        self.window.blit(glow, glow.get_rect(center=rect.center))
        pygame.draw.circle(self.window, PALETTE["item"], rect.center, BLOCK // 2 - 2)

    def _draw_overlay(self, lines: list[str]) -> None:
        width, height = self.window.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((5, 5, 15, 140))
        for idx, text in enumerate(lines):
            surf = self.font.render(text, True, PALETTE["text"])
            rect = surf.get_rect()
            rect.center = (width // 2, height // 2 + idx * (FONT_SIZE + 8))
            overlay.blit(surf, rect)
        self.window.blit(overlay, (0, 0))

    def show_score(self, score: int) -> None:
        hud_rect = pygame.Rect(0, 0, self.board_size[0], HUD_HEIGHT)
        self.window.fill(PALETTE["hud"], hud_rect)
        text = self.font.render(f"SCORE {score:03d}", True, PALETTE["text"])
        self.window.blit(text, (10, (HUD_HEIGHT - text.get_height()) // 2))

    def draw(self, snapshot: SessionSnapshot) -> None:
        """Render the current frame (background, item, snake, score)."""
        self.window.blit(self.background, (0, HUD_HEIGHT))
        if snapshot.item is not None:
            self._draw_item(snapshot.item)
        snake_colors = PALETTE["snake"]
        for idx, pos in enumerate(snapshot.segments):
            color = snake_colors[idx % len(snake_colors)]
            rect = cell_rect(pos)
            if idx == 0:
                rect = rect.inflate(2, 2)
            pygame.draw.rect(self.window, color, rect, border_radius=4)
        self.show_score(snapshot.score)

    def game_over(self, snapshot: SessionSnapshot) -> None:
        """Show the final score and wait for one key or the window closing."""
        self.draw(snapshot)
        self._draw_overlay(
            [
                "Game Over!",
                f"Your final score is: {snapshot.score:03d}",
                "Press any key",
            ]
        )
        pygame.display.update()
        pygame.time.wait(GAME_OVER_PAUSE_MS)
        pygame.event.clear()
        while True:
            event = pygame.event.wait()
            if event.type in (pygame.QUIT, pygame.KEYDOWN):
                return

    # --- Main loop -----------------------------------------------------

    def start(self) -> int:
        """Run the main loop: poll input, tick at a fixed rate, then render."""
        clock = pygame.time.Clock()
        try:
            while True:
                elapsed = clock.tick(FPS)
                if not apply_command(self.session, self.poll_command()):
                    break
                if self.session.tick(elapsed) is TickOutcome.DEAD:
                    break
                self.draw(self.session.snapshot())
                pygame.display.update()

            snapshot = self.session.snapshot()
            self.game_over(snapshot)
            return snapshot.score
        finally:
            pygame.quit()


def run_window(session: GameSession) -> int:
    logger.info("Opening %dx%d window", session.width * BLOCK, session.height * BLOCK)
    return WindowGame(session).start()
