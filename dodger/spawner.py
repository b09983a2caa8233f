import logging
import math

from .entities import Asteroid, Star

logger = logging.getLogger(__name__)


def asteroid_interval(elapsed, config):
    return max(config.ASTEROID_INTERVAL_FLOOR, config.ASTEROID_INTERVAL - elapsed * config.ASTEROID_INTERVAL_DECAY)


def star_interval(elapsed, config):
    return max(config.STAR_INTERVAL_FLOOR, config.STAR_INTERVAL - elapsed * config.STAR_INTERVAL_DECAY)


class Spawner:
    """Two accumulating timers that drop asteroids and stars in from the top.

    Intervals shrink linearly with elapsed game time down to a floor, and the
    fall speed of each new entity grows with elapsed time as well.
    """

    def __init__(self, config, rng):
        self.config = config
        self.rng = rng
        self.reset()

    def reset(self):
        self.asteroid_timer = 0.0
        self.star_timer = 0.0
        self.asteroid_interval = self.config.ASTEROID_INTERVAL
        self.star_interval = self.config.STAR_INTERVAL

    def update_intervals(self, elapsed):
        self.asteroid_interval = asteroid_interval(elapsed, self.config)
        self.star_interval = star_interval(elapsed, self.config)

    def update(self, dt, elapsed, asteroids, stars):
        """Advance both timers by dt and append whatever is due. Returns the spawn count."""
        spawned = 0
        self.asteroid_timer += dt
        if self.asteroid_timer >= self.asteroid_interval:
            self.asteroid_timer = 0.0
            asteroids.append(self.spawn_asteroid(elapsed))
            spawned += 1
        self.star_timer += dt
        if self.star_timer >= self.star_interval:
            self.star_timer = 0.0
            stars.append(self.spawn_star(elapsed))
            spawned += 1
        return spawned

    def spawn_asteroid(self, elapsed):
        cfg = self.config
        asteroid = Asteroid(
            x=self.rng.uniform(cfg.ASTEROID_SPAWN_MARGIN, cfg.WIDTH - cfg.ASTEROID_SPAWN_MARGIN),
            y=cfg.ASTEROID_SPAWN_Y,
            radius=self.rng.uniform(*cfg.ASTEROID_RADIUS),
            vy=self.rng.uniform(*cfg.ASTEROID_SPEED) + elapsed * cfg.ASTEROID_SPEEDUP,
            rotation=self.rng.uniform(0, 2 * math.pi),
            spin=self.rng.uniform(*cfg.ASTEROID_SPIN),
        )
        logger.debug("asteroid spawned at x=%.1f r=%.1f vy=%.1f", asteroid.x, asteroid.radius, asteroid.vy)
        return asteroid

    def spawn_star(self, elapsed):
        cfg = self.config
        star = Star(
            x=self.rng.uniform(cfg.STAR_SPAWN_MARGIN, cfg.WIDTH - cfg.STAR_SPAWN_MARGIN),
            y=cfg.STAR_SPAWN_Y,
            radius=cfg.STAR_RADIUS,
            vy=self.rng.uniform(*cfg.STAR_SPEED) + elapsed * cfg.STAR_SPEEDUP,
            glow=self.rng.uniform(*cfg.STAR_GLOW),
        )
        logger.debug("star spawned at x=%.1f vy=%.1f", star.x, star.vy)
        return star
