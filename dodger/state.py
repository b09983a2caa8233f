import enum
import logging
import math
from collections import namedtuple

from .entities import Player
from .spawner import Spawner

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


FlashRecord = namedtuple("FlashRecord", ["color", "remaining"])

Snapshot = namedtuple(
    "Snapshot",
    ["phase", "score", "lives", "elapsed", "player_x", "player_y", "player_radius",
     "asteroids", "stars", "flash", "final_score"],
)


class Flash:
    """Short full-screen tint shown after a pickup or a hit."""

    def __init__(self, duration):
        self.duration = duration
        self.color = None
        self.remaining = 0.0

    def trigger(self, color):
        self.color = color
        self.remaining = self.duration

    def decay(self, dt):
        if self.remaining > 0:
            self.remaining = max(0.0, self.remaining - dt)

    def clear(self):
        self.color = None
        self.remaining = 0.0

    @property
    def active(self):
        return self.remaining > 0

    @property
    def strength(self):
        if self.duration <= 0:
            return 0.0
        return self.remaining / self.duration


class GameState:
    """Everything the simulation owns: phase, counters, player, entities and spawn timers."""

    def __init__(self, config, rng):
        self.config = config
        self.phase = Phase.IDLE
        self.player = Player(config.WIDTH / 2, config.player_y, config.PLAYER_RADIUS, config.PLAYER_SPEED)
        self.asteroids = []
        self.stars = []
        self.spawner = Spawner(config, rng)
        self.flash = Flash(config.FLASH_DURATION)
        self.score = 0.0
        self.lives = config.START_LIVES
        self.elapsed = 0.0
        self.final_score = None

    # --- Transitions ---

    def new_game(self):
        self.score = 0.0
        self.lives = self.config.START_LIVES
        self.elapsed = 0.0
        self.final_score = None
        self.player.x = self.config.WIDTH / 2
        self.player.target_x = None
        self.asteroids.clear()
        self.stars.clear()
        self.spawner.reset()
        self.flash.clear()
        self.phase = Phase.RUNNING

    def start(self):
        """Start from the title screen or restart after game over."""
        if self.phase not in (Phase.IDLE, Phase.GAME_OVER):
            return False
        restarting = self.phase is Phase.GAME_OVER
        self.new_game()
        logger.info("game %s", "restarted" if restarting else "started")
        return True

    def pause(self):
        if self.phase is not Phase.RUNNING:
            return False
        self.phase = Phase.PAUSED
        logger.info("game paused at %.2fs", self.elapsed)
        return True

    def resume(self):
        if self.phase is not Phase.PAUSED:
            return False
        self.phase = Phase.RUNNING
        logger.info("game resumed")
        return True

    def toggle_pause(self):
        if self.phase is Phase.RUNNING:
            return self.pause()
        if self.phase is Phase.PAUSED:
            return self.resume()
        return False

    def end(self):
        if self.phase is not Phase.RUNNING:
            return False
        self.phase = Phase.GAME_OVER
        self.final_score = math.floor(self.score)
        logger.info("game over after %.2fs, final score %d", self.elapsed, self.final_score)
        return True

    # --- Queries ---

    @property
    def running(self):
        return self.phase is Phase.RUNNING

    @property
    def display_score(self):
        return math.floor(self.score)

    def snapshot(self):
        flash = FlashRecord(self.flash.color, self.flash.remaining) if self.flash.active else None
        return Snapshot(
            phase=self.phase,
            score=self.display_score,
            lives=self.lives,
            elapsed=self.elapsed,
            player_x=self.player.x,
            player_y=self.player.y,
            player_radius=self.player.radius,
            asteroids=tuple(a.record() for a in self.asteroids),
            stars=tuple(s.record() for s in self.stars),
            flash=flash,
            final_score=self.final_score,
        )
