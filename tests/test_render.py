from walled_snake.config import BG, WALL, FOOD, SNAKE, RIGHT
from walled_snake.game import GameState
from walled_snake.render import board_pixels, cell_rect, render, wall_cells


class RecordingSurface:
    def __init__(self):
        self.calls = []

    def fill(self, color, rect=None, special_flags=0):
        self.calls.append((color, tuple(rect)))


def make_state(snake, food):
    return GameState(snake=list(snake), direction=RIGHT, pending=RIGHT, food=food)


def test_draw_order_and_geometry():
    surface = RecordingSurface()
    state = make_state([(5, 5), (4, 5), (3, 5)], (8, 2))

    render(surface, state, size=10, cell_size=20)
    colors = [c for c, _ in surface.calls]

    assert surface.calls[0] == (BG, (0, 0, 200, 200))
    assert colors.count(WALL) == 36
    assert colors.count(FOOD) == 1
    assert colors.count(SNAKE) == 3

    last_wall = max(i for i, c in enumerate(colors) if c == WALL)
    food_at = colors.index(FOOD)
    first_snake = colors.index(SNAKE)
    assert last_wall < food_at < first_snake

    assert surface.calls[food_at] == (FOOD, (160, 40, 20, 20))
    head, body1, body2 = surface.calls[first_snake:]
    assert head == (SNAKE, (102, 102, 16, 16))
    assert body1 == (SNAKE, (84, 104, 12, 12))
    assert body2 == (SNAKE, (64, 104, 12, 12))


def test_wall_ring_covers_outer_cells_once():
    cells = list(wall_cells(5))
    assert len(cells) == len(set(cells)) == 16
    assert all(x in (0, 4) or y in (0, 4) for x, y in cells)


def test_render_is_stateless():
    state = make_state([(2, 2)], (1, 1))
    a, b = RecordingSurface(), RecordingSurface()
    render(a, state, 5, 10)
    render(b, state, 5, 10)
    assert a.calls == b.calls


def test_board_full_has_no_food_cell():
    surface = RecordingSurface()
    render(surface, make_state([(1, 1)], None), 3, 10)
    assert FOOD not in [c for c, _ in surface.calls]


def test_padding_never_collapses_tiny_cells():
    r = cell_rect(1, 1, 3, pad=4)
    assert r.width == r.height == 1
    assert (r.x, r.y) == (4, 4)


def test_board_pixels():
    assert board_pixels(20, 20) == 400
