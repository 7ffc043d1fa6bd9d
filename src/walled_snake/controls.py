# controls.py
from __future__ import annotations
from enum import Enum
from typing import Dict, Iterable, Optional, TYPE_CHECKING
import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import SnakeGame

if TYPE_CHECKING:
    from .hud import Hud


class Action(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE = "toggle"
    RESET = "reset"
    FASTER = "faster"
    SLOWER = "slower"


ACTION_DIRECTIONS = {
    Action.UP: UP,
    Action.DOWN: DOWN,
    Action.LEFT: LEFT,
    Action.RIGHT: RIGHT,
}

# Arrow keys and WASD steer, space starts/pauses, R resets, +/- change the tick rate
KEY_BINDINGS: Dict[int, Action] = {
    pygame.K_UP: Action.UP,
    pygame.K_w: Action.UP,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_s: Action.DOWN,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_a: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_d: Action.RIGHT,
    pygame.K_SPACE: Action.TOGGLE,
    pygame.K_r: Action.RESET,
    pygame.K_PLUS: Action.FASTER,
    pygame.K_EQUALS: Action.FASTER,
    pygame.K_KP_PLUS: Action.FASTER,
    pygame.K_MINUS: Action.SLOWER,
    pygame.K_KP_MINUS: Action.SLOWER,
}


def map_key(key: int) -> Optional[Action]:
    return KEY_BINDINGS.get(key)

def dispatch(game: SnakeGame, action: Action) -> None:
    """Forward one action into the engine."""
    if action in ACTION_DIRECTIONS:
        game.set_direction(ACTION_DIRECTIONS[action])
    elif action is Action.TOGGLE:
        game.toggle()
    elif action is Action.RESET:
        game.reset()
    elif action is Action.FASTER:
        game.set_tick_rate(game.tick_rate + 1)
    elif action is Action.SLOWER:
        game.set_tick_rate(game.tick_rate - 1)

def handle_key(game: SnakeGame, key: int) -> bool:
    """Dispatch the action bound to key. Returns False for unbound keys."""
    action = map_key(key)
    if action is None:
        return False
    dispatch(game, action)
    return True

def handle_input(game: SnakeGame, events: Iterable, hud: Optional["Hud"] = None) -> bool:
    """Process a batch of events. Return False to quit."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            handle_key(game, event.key)
        elif hud is not None:
            hud.handle_event(event, game)
    return True
