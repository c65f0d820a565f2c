from snake_server.grid import DOWN, LEFT, NONE, RIGHT, UP, Cell
from snake_server.snake import SnakeState


def test_spawn_is_idle_single_cell():
    snake = SnakeState.spawn(Cell(3, 3))
    assert snake.body == [Cell(3, 3)]
    assert snake.is_idle
    assert snake.pending == NONE


def test_first_direction_is_accepted_from_idle():
    snake = SnakeState.spawn(Cell(3, 3))
    snake.request(LEFT)
    assert snake.resolve_direction() == LEFT


def test_reverse_request_is_ignored():
    snake = SnakeState(body=[Cell(5, 5), Cell(5, 6)], direction=UP, pending=UP)
    snake.request(DOWN)
    assert snake.resolve_direction() == UP


def test_none_request_keeps_current_direction():
    snake = SnakeState(body=[Cell(5, 5)], direction=RIGHT, pending=NONE)
    assert snake.resolve_direction() == RIGHT


def test_only_last_request_before_tick_counts():
    snake = SnakeState(body=[Cell(5, 5)], direction=RIGHT, pending=RIGHT)
    snake.request(UP)
    snake.request(DOWN)
    assert snake.resolve_direction() == DOWN


def test_advance_translates_or_grows():
    snake = SnakeState(body=[Cell(5, 5), Cell(5, 6)])
    snake.advance(Cell(5, 4), grow=False)
    assert snake.body == [Cell(5, 4), Cell(5, 5)]
    snake.advance(Cell(5, 3), grow=True)
    assert snake.body == [Cell(5, 3), Cell(5, 4), Cell(5, 5)]


def test_respawn_clears_directions():
    snake = SnakeState(body=[Cell(1, 1), Cell(1, 2)], direction=UP, pending=LEFT)
    snake.respawn(Cell(4, 4))
    assert snake.body == [Cell(4, 4)]
    assert snake.direction == NONE
    assert snake.pending == NONE
