# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple
import logging

import numpy as np  # type: ignore

from .config import Config, DIRECTIONS, RIGHT, clamp_tick_rate
from .storage import HighScoreStore, MemoryStore

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
Direction = Tuple[int, int]

# Rejection sampling gives up after this many misses and picks from the free cells
MAX_FOOD_ATTEMPTS = 1000


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameEvent(Enum):
    MOVED = "moved"
    FOOD_EATEN = "food_eaten"
    COLLISION_WALL = "collision_wall"
    COLLISION_SELF = "collision_self"
    BOARD_FULL = "board_full"


TERMINAL_EVENTS = frozenset(
    {GameEvent.COLLISION_WALL, GameEvent.COLLISION_SELF, GameEvent.BOARD_FULL}
)


# ---------- Helpers ----------
def spawn_food(snake: Sequence[Position], size: int, rng: np.random.Generator) -> Position:
    """
    Pick a uniformly random cell not covered by the snake.
    The caller must leave at least one free cell.
    """
    occupied = set(snake)
    assert len(occupied) < size * size, "no free cell left for food"

    for _ in range(MAX_FOOD_ATTEMPTS):
        fx, fy = (int(v) for v in rng.integers(0, size, size=2))
        if (fx, fy) not in occupied:
            return (fx, fy)

    free = [(x, y) for x in range(size) for y in range(size) if (x, y) not in occupied]
    return free[int(rng.integers(len(free)))]

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Position]          # head at index 0
    direction: Direction           # committed on the last tick
    pending: Direction             # applied on the next tick
    food: Optional[Position]       # None only once the board is full
    score: int = 0
    run_state: RunState = RunState.IDLE
    last_tick: Optional[float] = None   # ms timestamp of the last committed tick
    tick_rate: int = 8
    last_event: Optional[GameEvent] = field(default=None)

def new_game_state(size: int, rng: np.random.Generator, tick_rate: int) -> GameState:
    center = size // 2
    snake = [(center, center)]
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=spawn_food(snake, size, rng),
        tick_rate=clamp_tick_rate(tick_rate),
    )


# ---------- Engine ----------
class SnakeGame:
    """
    Owns the game state and the high score.

    advance(), set_direction(), start(), pause(), toggle() and reset() are the
    only mutators of the snake and run state. A frame driver calls tick(now_ms)
    every frame; tests call advance() directly.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        store: Optional[HighScoreStore] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config if config is not None else Config()
        self.store = store if store is not None else HighScoreStore(MemoryStore())
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.high_score = self.store.load()
        self.state = new_game_state(self.size, self.rng, self.config.tick_rate)

    # Read-only views -----------------------------------------------------
    @property
    def size(self) -> int:
        return self.config.grid_size

    @property
    def snake(self) -> List[Position]:
        return self.state.snake

    @property
    def food(self) -> Optional[Position]:
        return self.state.food

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def run_state(self) -> RunState:
        return self.state.run_state

    @property
    def is_running(self) -> bool:
        return self.state.run_state is RunState.RUNNING

    @property
    def is_game_over(self) -> bool:
        return self.state.run_state is RunState.GAME_OVER

    @property
    def tick_rate(self) -> int:
        return self.state.tick_rate

    # Update ----------------------------------------------------------------
    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def advance(self) -> Optional[GameEvent]:
        """
        Advance the snake by one cell. Does nothing unless RUNNING.

        Returns the event of this tick: MOVED, FOOD_EATEN, or one of the
        terminal events (COLLISION_WALL, COLLISION_SELF, BOARD_FULL).
        Collisions leave the snake exactly as it was.
        """
        state = self.state
        if state.run_state is not RunState.RUNNING:
            return None

        # Commit direction once per tick
        state.direction = state.pending

        hx, hy = state.snake[0]
        dx, dy = state.direction
        new_head = (hx + dx, hy + dy)

        # Wall collision
        if not self._in_bounds(*new_head):
            return self._game_over(GameEvent.COLLISION_WALL)

        # Self collision, checked against the body before it moves: the tail
        # cell still counts as occupied.
        if new_head in state.snake:
            return self._game_over(GameEvent.COLLISION_SELF)

        state.snake.insert(0, new_head)

        if new_head != state.food:
            state.snake.pop()
            state.last_event = GameEvent.MOVED
            return GameEvent.MOVED

        # Eat & grow
        state.score += 1
        if len(state.snake) >= self.size * self.size:
            state.food = None
            return self._game_over(GameEvent.BOARD_FULL)

        state.food = spawn_food(state.snake, self.size, self.rng)
        logger.debug("Food eaten, score=%d, next food at %s", state.score, state.food)
        state.last_event = GameEvent.FOOD_EATEN
        return GameEvent.FOOD_EATEN

    def _game_over(self, event: GameEvent) -> GameEvent:
        state = self.state
        state.run_state = RunState.GAME_OVER
        state.last_event = event
        logger.info("Game over (%s) with score %d", event.value, state.score)

        if state.score > self.high_score:
            self.high_score = state.score
            logger.info("New high score: %d", self.high_score)
            self.store.save(self.high_score)
        return event

    def tick(self, now_ms: float) -> Optional[GameEvent]:
        """
        Throttled entry point for the frame loop: advances at most once,
        and only when 1000 / tick_rate ms have passed since the last tick.
        The first frame after start() only records the time.
        """
        state = self.state
        if state.run_state is not RunState.RUNNING:
            return None

        if state.last_tick is None:
            state.last_tick = now_ms
            return None

        if now_ms - state.last_tick < 1000.0 / state.tick_rate:
            return None  # not time to move yet

        state.last_tick = now_ms
        return self.advance()

    # Commands --------------------------------------------------------------
    def set_direction(self, direction: Direction) -> bool:
        """
        Buffer a direction for the next tick; the latest call wins.
        Reversals of the committed direction and non-directions are ignored.
        Returns True if the direction was accepted.
        """
        direction = tuple(direction)
        if direction not in DIRECTIONS:
            return False
        if is_opposite(direction, self.state.direction):
            return False
        self.state.pending = direction
        return True

    def start(self) -> None:
        if self.state.run_state is RunState.IDLE:
            self.state.run_state = RunState.RUNNING
            self.state.last_tick = None

    def pause(self) -> None:
        if self.state.run_state is RunState.RUNNING:
            self.state.run_state = RunState.IDLE

    def toggle(self) -> None:
        """Start/pause button semantics; ignored once the game is over."""
        if self.state.run_state is RunState.RUNNING:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Fresh single-segment snake at the center. High score and tick rate survive."""
        self.state = new_game_state(self.size, self.rng, self.state.tick_rate)

    def set_tick_rate(self, rate: float) -> int:
        self.state.tick_rate = clamp_tick_rate(rate)
        return self.state.tick_rate
