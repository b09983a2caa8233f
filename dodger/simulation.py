import logging
from collections import namedtuple

from . import DodgerError
from .controls import IDLE_INPUT
from .entities import circles_overlap, has_exited, swap_remove

logger = logging.getLogger(__name__)

ASTEROID_HIT = "asteroid_hit"
STAR_COLLECTED = "star_collected"
GAME_OVER = "game_over"

Event = namedtuple("Event", ["kind", "x", "y"])


def resolve_direction(player, inputs, snap_distance):
    """Direction in {-1, 0, 1} for this tick. A drag target overrides the keys."""
    if inputs.clear_target:
        player.target_x = None
    if inputs.target_x is not None:
        player.target_x = inputs.target_x

    direction = 0
    if inputs.left:
        direction -= 1
    if inputs.right:
        direction += 1

    if player.target_x is not None:
        delta = player.target_x - player.x
        if abs(delta) < snap_distance:
            player.x = player.target_x
            player.target_x = None
            return 0
        direction = 1 if delta > 0 else -1
    return direction


def move_player(player, direction, dt, config):
    player.x += direction * player.speed * dt
    player.x = max(config.min_x, min(config.max_x, player.x))


def step(state, inputs=IDLE_INPUT, dt=0.0):
    """Advance a running game by dt seconds. Returns the events of this tick."""
    if dt < 0:
        raise DodgerError(f"dt must be non-negative, got {dt}")
    if not state.running:
        return []

    cfg = state.config
    player = state.player
    events = []

    # -- 1. Difficulty --
    state.elapsed += dt
    state.spawner.update_intervals(state.elapsed)

    # -- 2. Player --
    direction = resolve_direction(player, inputs, cfg.SNAP_DISTANCE)
    move_player(player, direction, dt, cfg)

    # -- 3. Spawning --
    state.spawner.update(dt, state.elapsed, state.asteroids, state.stars)

    # -- 4. Kinematics --
    for asteroid in state.asteroids:
        asteroid.update(dt)
    for star in state.stars:
        star.update(dt)

    # -- 5. Prune & collide --
    hit_radius = player.radius * cfg.PLAYER_HITBOX_SCALE

    for i in range(len(state.asteroids) - 1, -1, -1):
        asteroid = state.asteroids[i]
        if has_exited(asteroid, cfg.HEIGHT, cfg.EXIT_MARGIN):
            swap_remove(state.asteroids, i)
            continue
        if circles_overlap(player.x, player.y, hit_radius, asteroid.x, asteroid.y, asteroid.radius):
            swap_remove(state.asteroids, i)
            state.lives = max(0, state.lives - 1)
            state.flash.trigger(cfg.COLOR_HIT)
            events.append(Event(ASTEROID_HIT, asteroid.x, asteroid.y))
            logger.debug("asteroid hit at x=%.1f, %d lives left", asteroid.x, state.lives)
            if state.lives <= 0:
                state.end()
                events.append(Event(GAME_OVER, player.x, player.y))
                return events

    for i in range(len(state.stars) - 1, -1, -1):
        star = state.stars[i]
        if has_exited(star, cfg.HEIGHT, cfg.EXIT_MARGIN):
            swap_remove(state.stars, i)
            continue
        if circles_overlap(player.x, player.y, hit_radius, star.x, star.y, star.radius):
            swap_remove(state.stars, i)
            state.score += cfg.STAR_POINTS
            state.flash.trigger(cfg.COLOR_PICKUP)
            events.append(Event(STAR_COLLECTED, star.x, star.y))
            logger.debug("star collected at x=%.1f, score %.1f", star.x, state.score)

    # -- 6. Survival score --
    state.score += dt * cfg.SCORE_RATE
    return events
