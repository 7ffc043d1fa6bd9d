# render.py
from __future__ import annotations
from typing import Protocol, Tuple
import pygame  # type: ignore

from .config import BG, WALL, FOOD, SNAKE, HEAD_PAD, BODY_PAD
from .game import GameState

Color = Tuple[int, int, int]


class FillSurface(Protocol):
    """The only drawing primitive the board needs; pygame.Surface satisfies it."""
    def fill(self, color, rect=None, special_flags=0): ...


def board_pixels(size: int, cell_size: int) -> int:
    return size * cell_size

def cell_rect(gx: int, gy: int, cell_size: int, pad: int = 0) -> pygame.Rect:
    """Pixel rect of grid cell (gx, gy), shrunk by pad on every side (never below 1px)."""
    pad = min(pad, (cell_size - 1) // 2)
    side = cell_size - pad * 2
    return pygame.Rect(gx * cell_size + pad, gy * cell_size + pad, side, side)

def draw_cell(surface: FillSurface, gx: int, gy: int, cell_size: int, color: Color, pad: int = 0) -> None:
    surface.fill(color, cell_rect(gx, gy, cell_size, pad))

def wall_cells(size: int):
    """Every cell of the outermost ring, each yielded once."""
    last = size - 1
    for i in range(size):
        yield (i, 0)
        yield (i, last)
    for i in range(1, last):
        yield (0, i)
        yield (last, i)

def render(surface: FillSurface, state: GameState, size: int, cell_size: int) -> None:
    """
    Draw the board: background, wall ring, food, then the snake on top.
    Stateless; later fills overwrite earlier ones.
    """
    side = board_pixels(size, cell_size)
    surface.fill(BG, pygame.Rect(0, 0, side, side))

    for gx, gy in wall_cells(size):
        draw_cell(surface, gx, gy, cell_size, WALL)

    if state.food is not None:
        draw_cell(surface, state.food[0], state.food[1], cell_size, FOOD)

    for i, (x, y) in enumerate(state.snake):
        draw_cell(surface, x, y, cell_size, SNAKE, HEAD_PAD if i == 0 else BODY_PAD)
