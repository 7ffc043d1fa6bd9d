# hud.py
"""Panel under the board: score badges, start/pause and reset buttons, tick-rate slider."""
from __future__ import annotations
from typing import Tuple
import pygame  # type: ignore

from .config import (
    HUD_HEIGHT, MIN_TICK_RATE, MAX_TICK_RATE,
    PANEL, TEXT, MUTED, ACCENT, BADGE, DANGER, MIN_WINDOW_WIDTH,
)
from .game import GameEvent, SnakeGame

PAD = 12
ROW_H = 28


class Button:
    def __init__(self, rect: pygame.Rect) -> None:
        self.rect = rect

    def hit(self, pos: Tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, label: str, color=ACCENT) -> None:
        pygame.draw.rect(surface, color, self.rect, border_radius=8)
        txt = font.render(label, True, TEXT)
        surface.blit(txt, txt.get_rect(center=self.rect.center))


class Slider:
    """Horizontal integer slider over [lo, hi]; the knob snaps to whole values."""

    def __init__(self, rect: pygame.Rect, lo: int, hi: int) -> None:
        self.rect = rect
        self.lo = lo
        self.hi = hi
        self.dragging = False

    def hit(self, pos: Tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)

    def value_at(self, x: int) -> int:
        frac = (x - self.rect.left) / max(self.rect.width - 1, 1)
        frac = max(0.0, min(1.0, frac))
        return self.lo + int(round(frac * (self.hi - self.lo)))

    def knob_x(self, value: int) -> int:
        frac = (value - self.lo) / (self.hi - self.lo)
        return self.rect.left + int(round(frac * (self.rect.width - 1)))

    def draw(self, surface: pygame.Surface, value: int) -> None:
        track = pygame.Rect(self.rect.left, self.rect.centery - 2, self.rect.width, 4)
        pygame.draw.rect(surface, BADGE, track, border_radius=2)
        filled = pygame.Rect(track.left, track.top, self.knob_x(value) - track.left, track.height)
        pygame.draw.rect(surface, ACCENT, filled, border_radius=2)
        pygame.draw.circle(surface, TEXT, (self.knob_x(value), self.rect.centery), 8)


class Hud:
    """
    Pure reflection of the engine plus three controls. Lives in a strip of
    HUD_HEIGHT pixels starting at y=top.
    """

    def __init__(self, top: int, width: int) -> None:
        self.top = top
        self.width = max(width, MIN_WINDOW_WIDTH)
        row1 = top + PAD
        row2 = row1 + ROW_H + PAD
        self.reset_button = Button(pygame.Rect(self.width - PAD - 72, row1, 72, ROW_H))
        self.toggle_button = Button(pygame.Rect(self.reset_button.rect.left - 8 - 80, row1, 80, ROW_H))
        self.slider = Slider(pygame.Rect(PAD + 64, row2, self.width - 2 * PAD - 64 - 64, ROW_H),
                             MIN_TICK_RATE, MAX_TICK_RATE)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(0, self.top, self.width, HUD_HEIGHT)

    # ---------- Input ----------
    def handle_event(self, event, game: SnakeGame) -> bool:
        """Apply a mouse event to the game. Returns True if the HUD consumed it."""
        if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 1) == 1:
            if self.toggle_button.hit(event.pos):
                game.toggle()
                return True
            if self.reset_button.hit(event.pos):
                game.reset()
                return True
            if self.slider.hit(event.pos):
                self.slider.dragging = True
                game.set_tick_rate(self.slider.value_at(event.pos[0]))
                return True
        elif event.type == pygame.MOUSEMOTION and self.slider.dragging:
            game.set_tick_rate(self.slider.value_at(event.pos[0]))
            return True
        elif event.type == pygame.MOUSEBUTTONUP and self.slider.dragging:
            self.slider.dragging = False
            return True
        return False

    # ---------- Draw ----------
    def _badge(self, surface: pygame.Surface, font: pygame.font.Font, x: int, y: int, text: str, color) -> int:
        txt = font.render(text, True, TEXT)
        rect = pygame.Rect(x, y, txt.get_width() + 16, ROW_H)
        pygame.draw.rect(surface, color, rect, border_radius=10)
        surface.blit(txt, txt.get_rect(center=rect.center))
        return rect.right + 8

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, game: SnakeGame) -> None:
        surface.fill(PANEL, self.rect)
        row1 = self.top + PAD

        x = self._badge(surface, font, PAD, row1, f"Score: {game.score}", ACCENT)
        x = self._badge(surface, font, x, row1, f"Best: {game.high_score}", BADGE)
        if game.is_game_over:
            self._badge(surface, font, x, row1, "Game Over", DANGER)

        self.toggle_button.draw(surface, font, "Pause" if game.is_running else "Start")
        self.reset_button.draw(surface, font, "Reset", BADGE)

        label = font.render("Speed", True, MUTED)
        surface.blit(label, label.get_rect(midleft=(PAD, self.slider.rect.centery)))
        self.slider.draw(surface, game.tick_rate)
        value = font.render(f"{game.tick_rate} tps", True, TEXT)
        surface.blit(value, value.get_rect(midleft=(self.slider.rect.right + 12, self.slider.rect.centery)))


def draw_game_over(surface: pygame.Surface, font: pygame.font.Font, game: SnakeGame) -> None:
    # Dim with translucent overlay
    w, h = surface.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    surface.blit(overlay, (0, 0))

    won = game.state.last_event is GameEvent.BOARD_FULL
    title = font.render("BOARD FULL" if won else "GAME OVER", True, (240, 240, 250))
    sub   = font.render("Press R to restart", True, (220, 220, 230))
    sco   = font.render(f"Score: {game.score}", True, (220, 220, 230))

    tx = title.get_rect(center=(w // 2, h // 2 - 16))
    sx = sub.get_rect(center=(w // 2, h // 2 + 16))
    cx = sco.get_rect(center=(w // 2, h // 2 + 44))

    surface.blit(title, tx)
    surface.blit(sub, sx)
    surface.blit(sco, cx)
