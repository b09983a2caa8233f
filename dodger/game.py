from . import init_rng
from .clock import FrameClock
from .config import DEFAULT_CONFIG
from .controls import IDLE_INPUT, InputController
from .simulation import step
from .state import GameState


class Game:
    """One playable session: state, input and clock driven by one tick per frame."""

    def __init__(self, config=DEFAULT_CONFIG, seed=None, rng=None, scale_x=1.0):
        self.config = config.validate()
        self.rng = rng if rng is not None else init_rng(seed)
        self.state = GameState(config, self.rng)
        self.controls = InputController(config.min_x, config.max_x, scale_x=scale_x)
        self.clock = FrameClock(config.MAX_DT, config.DEFAULT_DT)
        self.last_events = []

    def tick(self, now=None, dt=None):
        """Run one frame. Pass either a clock sample or an explicit dt."""
        if dt is None:
            dt = self.clock.sample(now)
        else:
            dt = max(0.0, min(self.config.MAX_DT, dt))

        self.state.flash.decay(dt)

        start_requested, pause_toggles = self.controls.take_commands()
        if start_requested and self.state.start():
            self.controls.drop_target()
        for _ in range(pause_toggles):
            self.state.toggle_pause()

        # Pending pointer input waits until the game is running again.
        inputs = self.controls.sample() if self.state.running else IDLE_INPUT
        self.last_events = step(self.state, inputs, dt)
        return self.last_events

    def snapshot(self):
        return self.state.snapshot()
