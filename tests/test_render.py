import pygame
import pytest

from dodger.entities import Asteroid, Star
from dodger.render import Renderer
from dodger.state import GameState


@pytest.fixture
def surface(config):
    pygame.init()
    return pygame.Surface((config.WIDTH, config.HEIGHT))


def test_draws_every_phase(config, rng, surface):
    renderer = Renderer(config, seed=0)
    state = GameState(config, rng)
    renderer.draw(surface, state.snapshot())

    state.start()
    state.asteroids.append(Asteroid(100, 100, 14, vy=100, rotation=0.3))
    state.stars.append(Star(200, 200, 7, vy=80, glow=0.8))
    renderer.draw(surface, state.snapshot())

    state.pause()
    renderer.draw(surface, state.snapshot())
    state.resume()
    state.end()
    renderer.draw(surface, state.snapshot())


def test_flash_tints_the_screen(config, rng, surface):
    renderer = Renderer(config, seed=0)
    state = GameState(config, rng)
    state.start()
    renderer.draw(surface, state.snapshot())
    plain = surface.get_at((config.WIDTH // 2, config.HEIGHT // 3))

    state.flash.trigger(config.COLOR_HIT)
    renderer.draw(surface, state.snapshot())
    tinted = surface.get_at((config.WIDTH // 2, config.HEIGHT // 3))

    assert tinted.r > plain.r
