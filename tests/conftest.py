# tests/conftest.py
import logging
import os
import sys
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# Add repo root (parent of this file) to import search path
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

import pytest

from dodger import init_rng
from dodger.config import GameConfig
from dodger.state import GameState


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return init_rng(1234)


@pytest.fixture
def running_state(config, rng):
    state = GameState(config, rng)
    state.start()
    return state


@pytest.fixture(autouse=True)
def reset_dodger_logger():
    logger = logging.getLogger("dodger")
    level, handlers = logger.level, list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
