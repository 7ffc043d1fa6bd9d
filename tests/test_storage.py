import json

from walled_snake.game import SnakeGame
from walled_snake.config import Config
from walled_snake.storage import HighScoreStore, JsonFileStore, MemoryStore


class BrokenStore:
    def get(self, key):
        raise OSError("storage unavailable")

    def set(self, key, value):
        raise OSError("storage unavailable")


def test_missing_key_loads_zero():
    assert HighScoreStore(MemoryStore()).load() == 0


def test_save_then_load():
    kv = MemoryStore()
    hs = HighScoreStore(kv)
    assert hs.save(12)
    assert kv.get("snake-high") == "12"
    assert hs.load() == 12


def test_custom_key():
    kv = MemoryStore({"other": "4"})
    assert HighScoreStore(kv, key="other").load() == 4


def test_corrupt_values_load_zero():
    assert HighScoreStore(MemoryStore({"snake-high": "abc"})).load() == 0
    assert HighScoreStore(MemoryStore({"snake-high": "-3"})).load() == 0


def test_broken_store_degrades_gracefully(caplog):
    hs = HighScoreStore(BrokenStore())
    assert hs.load() == 0
    assert hs.save(3) is False
    assert "High score unavailable" in caplog.text


def test_engine_survives_broken_store():
    game = SnakeGame(Config(grid_size=20, seed=0), store=HighScoreStore(BrokenStore()))
    assert game.high_score == 0

    game.state.snake = [(19, 5), (18, 5)]
    game.state.score = 1
    game.start()
    game.advance()
    assert game.is_game_over
    assert game.high_score == 1


def test_json_file_store_round_trip(tmp_path):
    path = tmp_path / "nested" / "store.json"
    store = JsonFileStore(path)
    assert store.get("snake-high") is None

    store.set("snake-high", "9")
    store.set("unrelated", "x")

    assert json.loads(path.read_text(encoding="utf-8")) == {"snake-high": "9", "unrelated": "x"}
    assert JsonFileStore(path).get("snake-high") == "9"
    assert HighScoreStore(JsonFileStore(path)).load() == 9


def test_json_file_store_corrupt_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")

    assert HighScoreStore(JsonFileStore(path)).load() == 0

    JsonFileStore(path).set("snake-high", "2")
    assert HighScoreStore(JsonFileStore(path)).load() == 2


def test_json_file_store_rejects_non_object(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert HighScoreStore(JsonFileStore(path)).load() == 0
