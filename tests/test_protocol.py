import json

import pytest

from snake_server import protocol
from snake_server.difficulty import PRESETS
from snake_server.grid import Cell
from snake_server.intents import Intent


def test_parse_rejects_invalid_json():
    with pytest.raises(ValueError):
        protocol.parse_client_message("{oops")


def test_parse_rejects_non_objects():
    with pytest.raises(ValueError):
        protocol.parse_client_message("[1, 2]")


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"type": "input", "direction": "up"}, ("intent", Intent.UP)),
        ({"type": "input", "direction": "right"}, ("intent", Intent.RIGHT)),
        ({"type": "pause"}, ("intent", Intent.PAUSE)),
        ({"type": "restart"}, ("intent", Intent.RESTART)),
        ({"type": "difficulty", "preset": "hard"}, ("difficulty", "hard")),
    ],
)
def test_decode_request(payload, expected):
    assert protocol.decode_request(payload) == expected


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "input", "direction": "pause"},
        {"type": "input"},
        {"type": "difficulty"},
        {"type": "teleport"},
        {},
    ],
)
def test_decode_rejects_bad_requests(payload):
    with pytest.raises(ValueError):
        protocol.decode_request(payload)


def test_encode_snapshot(make_engine):
    engine = make_engine(obstacle_count=3)
    engine.snake.body = [Cell(2, 2), Cell(2, 3)]
    engine.food = Cell(9, 9)

    data = json.loads(protocol.encode_snapshot(engine.snapshot(), paused=True))

    assert data["type"] == "snapshot"
    assert data["paused"] is True
    assert data["snake"] == [{"x": 2, "y": 2}, {"x": 2, "y": 3}]
    assert data["food"] == {"x": 9, "y": 9}
    assert len(data["obstacles"]) == 3
    assert data["gridSize"] == 30
    assert data["score"] == 0


def test_encode_welcome():
    data = json.loads(protocol.encode_welcome(PRESETS, PRESETS["easy"], best=9))
    assert data["type"] == "welcome"
    assert data["best"] == 9
    assert data["presets"]["hard"] == {"ticksPerSecond": 12, "gridSize": 30, "obstacleCount": 30}
    assert data["difficulty"]["ticksPerSecond"] == 6
