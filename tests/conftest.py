import numpy as np
import pytest

from walled_snake.config import Config, RIGHT
from walled_snake.game import RunState, SnakeGame
from walled_snake.storage import HighScoreStore, MemoryStore


def place(game, snake, direction=RIGHT, food=None, score=None, running=True):
    """Put the game into an exact position: snake head first, committed direction, food."""
    st = game.state
    st.snake = list(snake)
    st.direction = direction
    st.pending = direction
    if food is not None:
        st.food = food
    st.score = len(st.snake) - 1 if score is None else score
    st.run_state = RunState.RUNNING if running else RunState.IDLE
    return game


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def game(store):
    return SnakeGame(Config(grid_size=20, seed=0), store=HighScoreStore(store), rng=np.random.default_rng(0))
