from dataclasses import replace

import pytest

from dodger import DodgerError
from dodger.config import GameConfig, seed_from_env
from dodger.logs import setup_logging


def test_defaults_match_the_arcade_layout():
    cfg = GameConfig().validate()
    assert (cfg.WIDTH, cfg.HEIGHT) == (360, 600)
    assert cfg.player_y == 540
    assert (cfg.min_x, cfg.max_x) == (16, 344)


def test_from_env_applies_overrides():
    cfg = GameConfig.from_env({"DODGER_START_LIVES": "5", "DODGER_MAX_DT": "0.05", "DODGER_FPS": "60"})
    assert cfg.START_LIVES == 5
    assert cfg.MAX_DT == 0.05
    assert cfg.FPS == 60


def test_from_env_without_overrides():
    assert GameConfig.from_env({}) == GameConfig()


@pytest.mark.parametrize("environ", [
    {"DODGER_START_LIVES": "three"},
    {"DODGER_START_LIVES": "0"},
    {"DODGER_MAX_DT": "-1"},
    {"DODGER_FPS": "0"},
])
def test_from_env_rejects_bad_values(environ):
    with pytest.raises(DodgerError):
        GameConfig.from_env(environ)


@pytest.mark.parametrize("changes", [
    {"WIDTH": 30},
    {"ASTEROID_RADIUS": (18, 10)},
    {"STAR_INTERVAL_FLOOR": 0},
])
def test_validate_rejects_broken_configs(changes):
    with pytest.raises(DodgerError):
        replace(GameConfig(), **changes).validate()


def test_seed_from_env():
    assert seed_from_env({}) is None
    assert seed_from_env({"DODGER_SEED": "42"}) == 42
    with pytest.raises(DodgerError):
        seed_from_env({"DODGER_SEED": "x"})


def test_setup_logging_is_idempotent():
    logger = setup_logging("DEBUG")
    handlers = list(logger.handlers)
    assert setup_logging("INFO") is logger
    assert logger.handlers == handlers
    assert logger.level == 20
