import asyncio
import json

from websockets.exceptions import ConnectionClosed

from snake_server.difficulty import PRESETS
from snake_server.grid import DOWN
from snake_server.main import GameServer


class FakeConnection:
    remote_address = ("127.0.0.1", 50000)

    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []
        self.closed = False

    async def send(self, payload):
        if self.fail:
            raise ConnectionError("gone")
        self.sent.append(payload)

    async def close(self):
        self.closed = True


def _server(make_engine):
    return GameServer("127.0.0.1", 0, make_engine(), frame_rate=60)


def test_direction_message_is_buffered(make_engine):
    server = _server(make_engine)
    server.handle_message(json.dumps({"type": "input", "direction": "down"}))
    assert server.engine.snake.pending == DOWN
    assert server._pending_snapshot is None


def test_pause_message_queues_snapshot(make_engine):
    server = _server(make_engine)
    server.handle_message('{"type": "pause"}')
    assert server.scheduler.paused
    assert json.loads(server._pending_snapshot)["paused"] is True


def test_difficulty_message_applies_preset(make_engine):
    server = _server(make_engine)
    server.handle_message('{"type": "difficulty", "preset": "hard"}')
    assert server.difficulty.current == PRESETS["hard"]
    assert len(server.engine.obstacles) == 30
    assert server.difficulty.seconds_per_tick == 1 / 12


def test_bad_messages_are_ignored(make_engine):
    server = _server(make_engine)
    before = server.difficulty.current
    server.handle_message("not json")
    server.handle_message('{"type": "difficulty", "preset": "impossible"}')
    server.handle_message('{"type": "warp"}')
    assert server.difficulty.current == before
    assert server._pending_snapshot is None


def test_tick_queues_and_broadcast_sends_snapshot(make_engine):
    server = _server(make_engine)
    healthy = FakeConnection()
    broken = FakeConnection(fail=True)
    server.clients.update({healthy, broken})

    server.scheduler.on_frame(0.0)
    server.scheduler.on_frame(1.0)
    asyncio.run(server._broadcast_snapshot())

    assert len(healthy.sent) == 1
    assert json.loads(healthy.sent[0])["type"] == "snapshot"
    assert broken.closed
    assert server.clients == {healthy}
    assert server._pending_snapshot is None


class LeavingConnection(FakeConnection):
    """Removes a peer from the server while its own send is in flight."""

    def __init__(self, server):
        super().__init__()
        self.server = server

    async def send(self, payload):
        await asyncio.sleep(0)
        for peer in list(self.server.clients):
            if peer is not self:
                self.server.clients.discard(peer)
                break
        self.sent.append(payload)


def test_broadcast_survives_clients_leaving_mid_send(make_engine):
    server = _server(make_engine)
    connections = [LeavingConnection(server) for _ in range(3)]
    server.clients.update(connections)
    server._queue_snapshot()

    asyncio.run(server._broadcast_snapshot())

    assert len(server.clients) < 3
    assert all(len(ws.sent) == 1 for ws in server.clients)


class ClosingConnection(FakeConnection):
    async def send(self, payload):
        raise ConnectionClosed(None, None)


def test_client_closing_during_greeting_is_forgotten(make_engine):
    server = _server(make_engine)
    ws = ClosingConnection()

    asyncio.run(server._handle_client(ws))

    assert ws not in server.clients
