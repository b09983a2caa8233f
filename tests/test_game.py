import pytest

from dodger.controls import LEFT
from dodger.game import Game
from dodger.state import Phase


def test_start_command_applies_on_next_tick():
    game = Game(seed=3)
    game.controls.start()
    assert game.state.phase is Phase.IDLE
    game.tick(dt=0.016)
    assert game.state.phase is Phase.RUNNING


def test_explicit_dt_is_clamped():
    game = Game(seed=3)
    game.controls.start()
    game.tick(dt=5.0)
    assert game.state.elapsed == pytest.approx(0.033)


def test_clock_samples_drive_the_step():
    game = Game(seed=3)
    game.controls.start()
    game.tick(now=10.0)
    game.tick(now=10.02)
    game.tick(now=90.0)
    assert game.state.elapsed == pytest.approx(0.016 + 0.02 + 0.033)


def test_pause_toggle_from_keys():
    game = Game(seed=3)
    game.controls.start()
    game.tick(dt=0.016)
    game.controls.press(LEFT)
    game.controls.toggle_pause()
    game.tick(dt=0.016)
    assert game.state.phase is Phase.PAUSED
    x = game.state.player.x

    game.tick(dt=0.016)
    assert game.state.player.x == x

    game.controls.toggle_pause()
    game.tick(dt=0.016)
    assert game.state.phase is Phase.RUNNING
    assert game.state.player.x < x


def test_flash_fades_across_frames_even_when_paused():
    game = Game(seed=3)
    game.controls.start()
    game.tick(dt=0.016)
    game.state.flash.trigger((255, 0, 0))
    game.state.pause()
    for _ in range(10):
        game.tick(dt=0.033)
    assert game.snapshot().flash is None


def test_restart_after_game_over():
    game = Game(seed=3)
    game.controls.start()
    game.tick(dt=0.016)
    game.state.score = 50
    game.state.end()

    game.controls.start()
    game.tick(dt=0.016)
    snap = game.snapshot()
    assert snap.phase is Phase.RUNNING
    assert snap.score == 0
    assert snap.lives == 3


def test_pointer_release_while_paused_applies_on_resume():
    game = Game(seed=3)
    game.controls.start()
    game.controls.set_target(40)
    game.tick(dt=0.016)
    assert game.state.player.target_x == 40

    game.controls.toggle_pause()
    game.tick(dt=0.016)
    game.controls.clear_target()
    game.tick(dt=0.016)
    assert game.state.player.target_x == 40

    game.controls.toggle_pause()
    x = game.state.player.x
    game.tick(dt=0.016)
    assert game.state.phase is Phase.RUNNING
    assert game.state.player.target_x is None
    assert game.state.player.x == x


def test_pointer_press_while_paused_applies_on_resume():
    game = Game(seed=3)
    game.controls.start()
    game.tick(dt=0.016)
    game.controls.toggle_pause()
    game.tick(dt=0.016)

    game.controls.set_target(300)
    game.tick(dt=0.016)
    assert game.state.player.target_x is None

    game.controls.toggle_pause()
    game.tick(dt=0.016)
    assert game.state.player.target_x == 300
    assert game.state.player.x > 180


def test_start_drops_pending_pointer_target():
    game = Game(seed=3)
    game.controls.set_target(300)
    game.controls.start()
    game.tick(dt=0.016)
    assert game.state.phase is Phase.RUNNING
    assert game.state.player.target_x is None
    assert game.state.player.x == 180
