from snake_server.grid import LEFT, UP, Cell
from snake_server.intents import Intent, apply_intent
from snake_server.scheduler import Scheduler


def _scheduler(engine):
    return Scheduler(tick=engine.tick, render=lambda: None, interval=lambda: 0.1)


def test_direction_intent_is_buffered(make_engine):
    engine = make_engine()
    scheduler = _scheduler(engine)
    apply_intent(Intent.LEFT, engine, scheduler)
    assert engine.snake.pending == LEFT
    assert engine.snake.direction.is_none


def test_pause_intent_toggles(make_engine):
    engine = make_engine()
    scheduler = _scheduler(engine)
    apply_intent(Intent.PAUSE, engine, scheduler)
    assert scheduler.paused
    apply_intent(Intent.PAUSE, engine, scheduler)
    assert not scheduler.paused


def test_restart_intent_clears_score_and_resumes(make_engine):
    engine = make_engine()
    scheduler = _scheduler(engine)
    engine.snake.body = [Cell(3, 3), Cell(3, 4)]
    engine.snake.direction = UP
    engine.scores.current = 4
    scheduler.pause()

    apply_intent(Intent.RESTART, engine, scheduler)

    assert engine.score == 0
    assert len(engine.snake) == 1
    assert not scheduler.paused


def test_only_movement_intents_have_directions():
    assert Intent.UP.direction == UP
    assert Intent.PAUSE.direction is None
    assert Intent.RESTART.direction is None
