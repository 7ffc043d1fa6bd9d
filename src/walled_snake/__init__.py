"""Snake on a walled grid: game engine, board renderer and pygame shell."""

from .config import Config
from .game import GameEvent, GameState, RunState, SnakeGame
from .storage import HighScoreStore, JsonFileStore, MemoryStore

__all__ = [
    "Config",
    "GameEvent",
    "GameState",
    "RunState",
    "SnakeGame",
    "HighScoreStore",
    "JsonFileStore",
    "MemoryStore",
]
