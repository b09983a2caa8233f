import os
from dataclasses import dataclass, replace

from . import DodgerError


@dataclass(frozen=True)
class GameConfig:
    # --- Viewport ---
    WIDTH: int = 360
    HEIGHT: int = 600
    MARGIN: float = 16
    EXIT_MARGIN: float = 20

    # --- Player ---
    PLAYER_OFFSET_Y: float = 60
    PLAYER_RADIUS: float = 12
    PLAYER_SPEED: float = 220
    PLAYER_HITBOX_SCALE: float = 0.9
    SNAP_DISTANCE: float = 4

    # --- Asteroids ---
    ASTEROID_SPAWN_Y: float = -20
    ASTEROID_SPAWN_MARGIN: float = 16
    ASTEROID_RADIUS: tuple = (10, 18)
    ASTEROID_SPEED: tuple = (90, 140)
    ASTEROID_SPEEDUP: float = 3
    ASTEROID_SPIN: tuple = (-2, 2)
    ASTEROID_INTERVAL: float = 0.9
    ASTEROID_INTERVAL_FLOOR: float = 0.38
    ASTEROID_INTERVAL_DECAY: float = 0.015

    # --- Stars ---
    STAR_SPAWN_Y: float = -16
    STAR_SPAWN_MARGIN: float = 12
    STAR_RADIUS: float = 7
    STAR_SPEED: tuple = (75, 110)
    STAR_SPEEDUP: float = 2
    STAR_GLOW: tuple = (0.6, 1.0)
    STAR_INTERVAL: float = 1.6
    STAR_INTERVAL_FLOOR: float = 0.9
    STAR_INTERVAL_DECAY: float = 0.01

    # --- Scoring ---
    START_LIVES: int = 3
    STAR_POINTS: float = 25
    SCORE_RATE: float = 5

    # --- Flash ---
    FLASH_DURATION: float = 0.18
    FLASH_ALPHA: float = 0.36
    COLOR_HIT: tuple = (255, 107, 107)
    COLOR_PICKUP: tuple = (255, 207, 89)

    # --- Frame timing ---
    FPS: int = 30
    MAX_DT: float = 0.033
    DEFAULT_DT: float = 0.016

    @property
    def player_y(self):
        return self.HEIGHT - self.PLAYER_OFFSET_Y

    @property
    def min_x(self):
        return self.MARGIN

    @property
    def max_x(self):
        return self.WIDTH - self.MARGIN

    def validate(self):
        if self.WIDTH <= 2 * self.MARGIN or self.HEIGHT <= 0:
            raise DodgerError(f"viewport {self.WIDTH}x{self.HEIGHT} too small for margin {self.MARGIN}")
        if self.START_LIVES < 1:
            raise DodgerError(f"START_LIVES must be at least 1, got {self.START_LIVES}")
        if self.MAX_DT <= 0 or self.DEFAULT_DT <= 0:
            raise DodgerError("frame deltas must be positive")
        if self.FPS <= 0:
            raise DodgerError(f"FPS must be positive, got {self.FPS}")
        for name in ("ASTEROID_RADIUS", "ASTEROID_SPEED", "ASTEROID_SPIN", "STAR_SPEED", "STAR_GLOW"):
            low, high = getattr(self, name)
            if low > high:
                raise DodgerError(f"{name} range is inverted: {low} > {high}")
        if self.ASTEROID_INTERVAL_FLOOR <= 0 or self.STAR_INTERVAL_FLOOR <= 0:
            raise DodgerError("spawn interval floors must be positive")
        return self

    @classmethod
    def from_env(cls, environ=None):
        """Build a config, applying DODGER_* overrides from the environment."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for key, field_name, cast in (
            ("DODGER_START_LIVES", "START_LIVES", int),
            ("DODGER_MAX_DT", "MAX_DT", float),
            ("DODGER_FPS", "FPS", int),
        ):
            raw = environ.get(key)
            if raw is None:
                continue
            try:
                overrides[field_name] = cast(raw)
            except ValueError:
                raise DodgerError(f"{key}={raw!r} is not a valid {cast.__name__}") from None
        return replace(cls(), **overrides).validate()


def seed_from_env(environ=None):
    environ = os.environ if environ is None else environ
    raw = environ.get("DODGER_SEED")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        raise DodgerError(f"DODGER_SEED={raw!r} is not an integer") from None


DEFAULT_CONFIG = GameConfig()
