# config.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import os

# ----- Grid & window -----
GRID_SIZE = 20
CELL_SIZE = 20
HUD_HEIGHT = 96
MIN_WINDOW_WIDTH = 400   # the HUD needs this much room even for tiny boards
FPS = 60            # frame rate of the window loop; movement is gated by the tick rate

# ----- Colors -----
BG    = (15, 23, 42)
WALL  = (100, 116, 139)
FOOD  = (239, 68, 68)
SNAKE = (34, 197, 94)
PANEL = (2, 6, 23)
TEXT  = (241, 245, 249)
MUTED = (148, 163, 184)
ACCENT = (99, 102, 241)
BADGE = (30, 41, 59)
DANGER = (239, 68, 68)

# Inset in pixels; the head is drawn larger than the body
HEAD_PAD = 2
BODY_PAD = 4

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Tick rate (ticks per second) -----
MIN_TICK_RATE = 2
MAX_TICK_RATE = 20
DEFAULT_TICK_RATE = 8

MIN_GRID_SIZE = 3

HIGH_SCORE_KEY = "snake-high"
DEFAULT_STORE_PATH = Path.home() / ".walled_snake.json"


def clamp_tick_rate(rate: float) -> int:
    """Round and clamp a requested tick rate into [MIN_TICK_RATE, MAX_TICK_RATE]."""
    return max(MIN_TICK_RATE, min(MAX_TICK_RATE, int(round(rate))))


def _env_int(environ: Mapping[str, str], name: str) -> Optional[int]:
    raw = environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


# ----- Tunables -----
@dataclass
class Config:
    grid_size: int = GRID_SIZE
    cell_size: int = CELL_SIZE
    tick_rate: int = DEFAULT_TICK_RATE
    seed: Optional[int] = None
    store_path: Path = DEFAULT_STORE_PATH
    store_key: str = HIGH_SCORE_KEY
    log_level: str = "INFO"

    def __post_init__(self):
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid_size must be >= {MIN_GRID_SIZE}, got {self.grid_size}")
        if self.cell_size < 1:
            raise ValueError(f"cell_size must be >= 1, got {self.cell_size}")
        self.tick_rate = clamp_tick_rate(self.tick_rate)
        self.store_path = Path(self.store_path)

    @property
    def board_px(self) -> int:
        return self.grid_size * self.cell_size

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build a Config from SNAKE_* environment variables, falling back to defaults:
          SNAKE_GRID_SIZE, SNAKE_CELL_SIZE, SNAKE_TICK_RATE, SNAKE_SEED,
          SNAKE_STORE_PATH, SNAKE_LOG_LEVEL
        """
        if environ is None:
            environ = os.environ

        kwargs = {}
        for field_name, var in (
            ("grid_size", "SNAKE_GRID_SIZE"),
            ("cell_size", "SNAKE_CELL_SIZE"),
            ("tick_rate", "SNAKE_TICK_RATE"),
            ("seed", "SNAKE_SEED"),
        ):
            value = _env_int(environ, var)
            if value is not None:
                kwargs[field_name] = value

        store_path = environ.get("SNAKE_STORE_PATH", "").strip()
        if store_path:
            kwargs["store_path"] = Path(store_path).expanduser()

        log_level = environ.get("SNAKE_LOG_LEVEL", "").strip()
        if log_level:
            kwargs["log_level"] = log_level.upper()

        return cls(**kwargs)
